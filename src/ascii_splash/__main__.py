from ascii_splash.cli.main import main

main()
