from harvestdoc.cli import run

run()
