from rocket_workshop.cli.main import main

main()
