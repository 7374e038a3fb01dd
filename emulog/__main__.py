from emulog.main import main

main()
