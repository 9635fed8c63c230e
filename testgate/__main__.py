from testgate.main import main

main()
