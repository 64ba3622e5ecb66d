from statefile.cli.main import app

app()
