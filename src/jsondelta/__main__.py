from jsondelta.cli.commands import app

app(prog_name="jsondelta")
