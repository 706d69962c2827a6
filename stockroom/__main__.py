from stockroom.app import main

main()
