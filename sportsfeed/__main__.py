from sportsfeed.run import main

main()
