from pixelaw_mcp.cli import main

main()
