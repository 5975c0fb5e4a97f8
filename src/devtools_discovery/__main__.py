from devtools_discovery.cli import main

main()
