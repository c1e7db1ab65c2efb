from rn_setup.pipeline import main

main()
