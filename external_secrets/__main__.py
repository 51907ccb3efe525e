from external_secrets.cli import main

main()
