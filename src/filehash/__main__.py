from filehash.cli import main

main(prog_name="filehash")
