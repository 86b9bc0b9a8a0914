from flask import abort

from shopfront.app.factory import create_app


def test_health():
    app = create_app()
    with app.test_client() as c:
        r = c.get("/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"


def test_unknown_path_renders_not_found(client, rendered):
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert b"Page Not Found" in r.data
    name, ctx = rendered[-1]
    assert name == "404.html"
    assert ctx["page_title"] == "Page Not Found"


def test_unknown_admin_path_renders_not_found(client):
    r = client.post("/admin/delete-product")
    assert r.status_code == 404
    assert b"<title>Page Not Found</title>" in r.data


def test_wrong_method_renders_not_found(client, rendered):
    r = client.delete("/admin/add-product")
    assert r.status_code == 404
    assert b"<title>Page Not Found</title>" in r.data

    r = client.post("/")
    assert r.status_code == 404
    name, ctx = rendered[-1]
    assert name == "404.html"
    assert ctx["page_title"] == "Page Not Found"


def test_unexpected_error_renders_server_error_page(app, client, rendered):
    @app.get("/explode")
    def explode():
        raise RuntimeError("boom")

    r = client.get("/explode")
    assert r.status_code == 500
    assert b"Something went wrong" in r.data
    name, ctx = rendered[-1]
    assert name == "500.html"
    assert ctx["page_title"] == "Server Error"


def test_bad_request_renders_error_page(app, client, rendered):
    @app.get("/reject")
    def reject():
        abort(400)

    r = client.get("/reject")
    assert r.status_code == 400
    name, ctx = rendered[-1]
    assert name == "400.html"
    assert ctx["page_title"] == "Bad Request"


def test_static_assets_are_served(client):
    r = client.get("/static/css/main.css")
    assert r.status_code == 200
    assert b".main-header" in r.data
    r.close()


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client):
    r = client.get("/")
    assert r.headers.get("X-Request-ID")


def test_each_app_gets_its_own_store():
    a = create_app()
    b = create_app()
    with a.test_client() as ca:
        ca.post("/admin/add-product", data={"title": "Only in A", "price": "1"})
    with b.test_client() as cb:
        assert b"Only in A" not in cb.get("/").data
