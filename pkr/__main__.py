from pkr.ui.cli import main

main()
