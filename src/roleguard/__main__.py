from roleguard.main import main

main()
