from ei.main import main

main()
