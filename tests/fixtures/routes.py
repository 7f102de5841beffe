"""Route file used by the router tests; ``r`` is the group being loaded."""

r.before("global_middleware_1", "global_middleware_2")  # noqa: F821
r.after("global_middleware_3")  # noqa: F821


def admin_routes(group):
    group.after("admin_middleware_after_1")
    group.before("admin_middleware_before_1")

    group.get("/dashboard").to("admin_dashboard")
    group.get("/login").to("admin_login").before("before_login_middleware_1")
    group.get("/{username}/profile").to("user_profile")
    group.put("/put_url").to("put_controller")

    def super_routes(g):
        g.get("/extra[/{id}]").to("super_extra").default("id", 999).named("super.extra")

    group.group(super_routes).prefix("/super").before("super_before")

    group.get("/month/{month}").named("month")


r.group("/admin", admin_routes)  # noqa: F821

(
    r.post("/logout")  # noqa: F821
    .to("user_logout")
    .named("user.logout")
    .before("logout_middleware_1")
    .after("logout_middleware_2")
)
