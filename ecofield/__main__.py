from ecofield.run import main

main()
