from hello_app.cli import main

main()
