from clangify.cli import main

main()
