from breadsim.cli import app

app(prog_name="breadsim")
