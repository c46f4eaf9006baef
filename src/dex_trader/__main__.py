from dex_trader.stdio_server import main

main()
