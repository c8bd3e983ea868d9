from casework.main import main

main()
