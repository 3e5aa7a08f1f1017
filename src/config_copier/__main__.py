from config_copier import main

main()
