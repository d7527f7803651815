from portfolio.main import cli

cli()
