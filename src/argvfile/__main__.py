from argvfile.cli import main

main()
