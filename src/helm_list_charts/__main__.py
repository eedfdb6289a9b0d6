from helm_list_charts.cli import app

app(prog_name="helm-list-charts")
