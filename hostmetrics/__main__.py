from hostmetrics.main import main

main()
