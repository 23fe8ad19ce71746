from recourse.cli.app import run

run()
