from git_repo_browser.cli.app import app

app()
