from deps_finder.cli import main

main()
