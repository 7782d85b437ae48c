from coderswap_mcp.mcp_server_std import main

main()
