from clawusecase_cli.cli import main

main()
