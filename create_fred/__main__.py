from create_fred.cli import main

main()
