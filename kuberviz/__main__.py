from kuberviz.cli import main

main()
