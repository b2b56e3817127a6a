from clawusecase_cli.mcp_server import main

main()
