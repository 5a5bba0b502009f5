from lokalise_mcp.server import main

main()
