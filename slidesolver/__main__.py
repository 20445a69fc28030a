from slidesolver.frontend.cli.app import app

app(prog_name="slidesolver")
