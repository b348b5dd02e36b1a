from conmenu.cli import cli_main

cli_main()
