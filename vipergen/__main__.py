from vipergen.cli import main

main()
