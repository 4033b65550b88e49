"""Tests for the Flask routes in main.py."""

import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


class TestCatalogueRoutes:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "OK"
        assert "timestamp" in body

    def test_algorithms_grouped(self, client):
        body = client.get("/api/algorithms").get_json()
        assert set(body) == {"sorting", "searching", "graph", "array"}
        ids = [a["id"] for a in body["searching"]]
        assert ids == ["binary-search", "linear-search"]
        assert "sourceText" not in body["sorting"][0]

    def test_algorithm_by_id(self, client):
        body = client.get("/api/algorithms/bubble-sort").get_json()
        assert body["name"] == "Bubble Sort"
        assert body["complexity"] == {"time": "O(n²)", "space": "O(1)"}
        assert "def bubble_sort" in body["sourceText"]

    def test_algorithm_by_name(self, client):
        resp = client.get("/api/algorithms/name/Binary%20Search")
        assert resp.status_code == 200
        assert resp.get_json()["id"] == "binary-search"

    def test_unknown_name_404(self, client):
        resp = client.get("/api/algorithms/name/Nope")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Algorithm not found"}

    def test_unknown_id_404(self, client):
        assert client.get("/api/algorithms/nope").status_code == 404


class TestVisualize:
    def test_bubble(self, client):
        resp = client.post("/api/visualize", json={
            "algorithm": "Bubble Sort",
            "input": [64, 34, 25, 12, 22, 11, 90],
        })
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["stepCount"] == 43
        assert body["steps"][-1]["message"] == "Final sorted array: [11, 12, 22, 25, 34, 64, 90]"
        assert body["flowchart"]["nodes"][0]["id"] == "start"
        assert body["metrics"]["swaps"] == 14

    def test_binary_with_target(self, client):
        body = client.post("/api/visualize", json={
            "algorithm": "binary-search", "input": "1, 3, 5, 7", "target": 7,
        }).get_json()
        assert body["steps"][-1]["foundIndex"] == 3

    def test_unknown_algorithm_generic(self, client):
        body = client.post("/api/visualize", json={"algorithm": "Foo Sort", "input": [1]}).get_json()
        assert body["stepCount"] == 3
        assert body["steps"][0]["message"] == "Processing algorithm: Foo Sort"

    def test_zero_input_allowed(self, client):
        resp = client.post("/api/visualize", json={"algorithm": "binary-search", "input": 0})
        assert resp.status_code == 200

    @pytest.mark.parametrize("payload", [
        {},
        {"algorithm": "bubble-sort"},
        {"algorithm": "bubble-sort", "input": "  "},
        {"algorithm": "bubble-sort", "input": []},
        {"algorithm": "", "input": [1]},
    ])
    def test_missing_fields_400(self, client, payload):
        resp = client.post("/api/visualize", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_internal_error_500(self, client, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("kaput")

        monkeypatch.setattr(main, "record", boom)
        resp = client.post("/api/visualize", json={"algorithm": "bubble-sort", "input": [1]})
        assert resp.status_code == 500
        assert resp.get_json()["message"] == "kaput"


class TestPlaybackRoutes:
    def test_index_renders(self, client):
        resp = client.get("/?algo=binary-search")
        assert resp.status_code == 200
        assert b"Binary Search" in resp.data
        assert b"<svg" in resp.data

    def test_select_and_step(self, client):
        body = client.post("/api/playback/select", json={"algorithm": "binary-search", "input": "23"}).get_json()
        assert body["state"]["cursor"] == 0
        assert body["state"]["stepCount"] == 7

        body = client.post("/api/playback/next").get_json()
        assert body["moved"] is True
        assert body["state"]["cursor"] == 1
        assert body["highlightedNode"] == "mid"

        body = client.get("/api/playback/state").get_json()
        assert body["state"]["cursor"] == 1

        body = client.post("/api/playback/prev").get_json()
        assert body["state"]["cursor"] == 0
        assert client.post("/api/playback/prev").get_json()["moved"] is False

    def test_step_to_end_finishes(self, client):
        client.post("/api/playback/select", json={"algorithm": "foo-sort", "input": [1]})
        client.post("/api/playback/next")
        body = client.post("/api/playback/next").get_json()
        assert body["state"]["phase"] == "finished"
        assert body["traceLog"][-1]["label"] == "Final Answer"
        assert client.post("/api/playback/next").get_json()["moved"] is False

    def test_select_uses_default_input(self, client):
        body = client.post("/api/playback/select", json={"algorithm": "bubble-sort"}).get_json()
        assert body["state"]["stepCount"] == 43

    def test_reset(self, client):
        client.post("/api/playback/select", json={"algorithm": "binary-search", "input": "23"})
        client.post("/api/playback/next")
        body = client.post("/api/playback/reset").get_json()
        assert body["state"]["cursor"] == 0
        assert body["state"]["phase"] == "loaded"

    def test_speed(self, client):
        client.post("/api/playback/select", json={"algorithm": "bubble-sort"})
        body = client.post("/api/playback/speed", json={"tier": 3}).get_json()
        assert body["state"]["speedTier"] == 3
        assert body["intervalMs"] == 500
        assert client.get("/api/playback/state").get_json()["state"]["speedTier"] == 3

    @pytest.mark.parametrize("tier", ["fast", 0, 7, None])
    def test_bad_speed_400(self, client, tier):
        client.post("/api/playback/select", json={"algorithm": "bubble-sort"})
        client.post("/api/playback/speed", json={"tier": 3})
        resp = client.post("/api/playback/speed", json={"tier": tier})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Speed tier must be 1, 2 or 3"}
        assert client.get("/api/playback/state").get_json()["state"]["speedTier"] == 3

    @pytest.mark.parametrize("url", [
        "/api/visualize",
        "/api/playback/select",
        "/api/playback/speed",
    ])
    @pytest.mark.parametrize("payload", [[1, 2], "x", 5])
    def test_non_object_body_400(self, client, url, payload):
        resp = client.post(url, json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_page_drops_stale_ticks(self, client):
        page = client.get("/").get_data(as_text=True)
        assert "queue = result.catch" in page
        assert "if (sent !== generation || !playing) return;" in page
        # the guard runs before the response is painted
        assert page.index("sent !== generation") < page.index("apply(data);\n      if (!data.moved")

    def test_state_without_selection(self, client):
        body = client.get("/api/playback/state").get_json()
        assert body["state"]["phase"] == "idle"
        assert body["html"]["svg"] == ""
