"""app: route definitions."""

from route_composer import Group, Route, Router

app = Router(name="app", debug=True)

app.before("session")
app.after("log_request")


def admin_routes(admin: Group) -> None:
    admin.before("auth")
    admin.get("/dashboard").to("admin.dashboard").named("admin.dashboard")
    admin.get("/{username}/profile").to("users.{username}.profile")
    reports = admin.group("/reports")
    reports.get("/{year:\\d{4}}[/{month}]").named("report")


app.group("/admin", admin_routes)
app.add_route(Route.post("/logout").to("user_logout").named("user.logout"))
app.get("/files/{rest:.*}").to("files.serve").named("files")


if __name__ == "__main__":
    route = app.resolve("/admin/jane/profile", "GET")
    print(route.handler, route.before_tags, route.after_tags)
    print(app.create_url("report", [2024, "may"]))
    print(app.resolve("/files/a/b/c", "GET").get_param("rest"))
