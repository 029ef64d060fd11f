from adventure_machine.cli.repl import main

main()
