"""Smoke test for the metadata resource registry."""

from sagepay_metadata.mcp import server


def test_server_exposes_health_resource() -> None:
    """Registry must contain the health resource and publish a status."""

    assert "health" in server.RESOURCE_REGISTRY
    health = server.RESOURCE_REGISTRY["health"]
    response = health()

    assert response["status"] == "ok"
    assert "SagePay" in response["detail"]


def test_main_lists_every_resource(capsys) -> None:
    server.main()

    output = capsys.readouterr().out
    for name in server.create_server()["resources"]:
        assert name in output
