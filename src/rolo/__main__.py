from rolo.cli.main import main

main()
