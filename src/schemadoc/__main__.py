from schemadoc.cli import main

main()
