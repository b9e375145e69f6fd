from cti.cli import run

run()
