from shahmaty.app import main

main()
