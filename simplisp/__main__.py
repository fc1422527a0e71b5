from simplisp.repl import main

main()
