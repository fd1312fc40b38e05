from bfhl.main import main

main()
