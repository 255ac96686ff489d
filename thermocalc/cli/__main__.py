from thermocalc.cli.main import main

main()
