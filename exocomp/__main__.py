from exocomp.cli import cli

cli(prog_name="exocomp")
