from mycontext.cli import app

app(prog_name="mycontext")
