from aaid.cli.main import app

app(prog_name="aaid")
