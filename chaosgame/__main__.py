from chaosgame.main import main

main()
