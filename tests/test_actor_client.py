import pytest

from jobgate.apify.client import ASYNC, SYNC, ActorClient, JobRequest, JobRun
from jobgate.exceptions import (
    ConfigurationError,
    DatasetFetchError,
    JobFailedError,
    JobTimeoutError,
    TransportError,
)

from conftest import FakeResponse, ok, run_payload


def _status_calls(session):
    return [c for c in session.calls if c[0] == "GET" and not c[1].endswith("/dataset/items")]


def _dataset_calls(session):
    return [c for c in session.calls if c[1].endswith("/dataset/items")]


@pytest.mark.asyncio
async def test_sync_run_posts_input_with_query_token(make_client):
    client, session = make_client([ok([{"title": "A"}, {"title": "B"}])])
    items = await client.run(JobRequest("actor-1", {"title": "Dev"}, SYNC))

    assert items == [{"title": "A"}, {"title": "B"}]
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url == "https://api.apify.com/v2/acts/actor-1/run-sync-get-dataset-items"
    assert kwargs["params"] == {"token": "apify_api_TESTTOKEN"}
    assert kwargs["json"] == {"title": "Dev"}
    assert kwargs["timeout"] is None


@pytest.mark.asyncio
async def test_sync_run_reports_http_status(make_client):
    client, _ = make_client([FakeResponse(404, {"error": {"message": "Actor was not found"}})])
    with pytest.raises(TransportError) as exc:
        await client.run(JobRequest("missing", {}, SYNC))
    assert exc.value.status_code == 404
    assert "HTTP 404" in str(exc.value)
    assert "Actor was not found" in str(exc.value)


@pytest.mark.asyncio
async def test_network_failure_is_transport_error(make_client, connection_error):
    client, _ = make_client([connection_error])
    with pytest.raises(TransportError, match="connection refused"):
        await client.run(JobRequest("actor-1", {}, SYNC))


@pytest.mark.asyncio
async def test_sync_run_rejects_non_list_body(make_client):
    client, _ = make_client([ok({"items": []})])
    with pytest.raises(TransportError, match="instead of a list"):
        await client.run(JobRequest("actor-1", {}, SYNC))


@pytest.mark.asyncio
async def test_async_run_polls_until_succeeded(make_client):
    responses = [run_payload("READY")]
    responses += [run_payload("RUNNING")] * 3
    responses += [run_payload("SUCCEEDED"), ok([{"title": "A"}])]
    client, session = make_client(responses)

    items = await client.run(JobRequest("actor-1", {"rows": 5}, ASYNC))

    assert items == [{"title": "A"}]
    assert len(_status_calls(session)) == 4
    assert len(_dataset_calls(session)) == 1
    start = session.calls[0]
    assert start[1] == "https://api.apify.com/v2/acts/actor-1/runs"
    assert start[2]["headers"] == {"Authorization": "Bearer apify_api_TESTTOKEN"}
    assert session.calls[-1][1] == "https://api.apify.com/v2/acts/actor-1/runs/run-1/dataset/items"


@pytest.mark.asyncio
async def test_async_run_times_out_without_fetching_dataset(make_client):
    responses = [run_payload("READY")] + [run_payload("RUNNING")] * 60
    client, session = make_client(responses)

    with pytest.raises(JobTimeoutError) as exc:
        await client.run(JobRequest("actor-1", {}, ASYNC))

    assert exc.value.last_status == "RUNNING"
    assert "did not complete" in str(exc.value)
    assert "status=RUNNING" in str(exc.value)
    assert len(_status_calls(session)) == 60
    assert _dataset_calls(session) == []


@pytest.mark.asyncio
async def test_attempt_budget_is_configurable(make_client):
    responses = [run_payload("RUNNING")] + [run_payload("RUNNING")] * 2
    client, session = make_client(responses, max_poll_attempts=2)
    with pytest.raises(JobTimeoutError):
        await client.run(JobRequest("actor-1", {}, ASYNC))
    assert len(_status_calls(session)) == 2


@pytest.mark.asyncio
async def test_failed_run_is_not_fetched(make_client):
    client, session = make_client([run_payload("RUNNING"), run_payload("FAILED")])
    with pytest.raises(JobFailedError) as exc:
        await client.run(JobRequest("actor-1", {}, ASYNC))
    assert exc.value.status == "FAILED"
    assert _dataset_calls(session) == []


@pytest.mark.asyncio
async def test_dataset_fetch_failure_is_distinct(make_client):
    client, _ = make_client([run_payload("SUCCEEDED"), FakeResponse(500, None, "upstream broke")])
    with pytest.raises(DatasetFetchError) as exc:
        await client.run(JobRequest("actor-1", {}, ASYNC))
    assert exc.value.status_code == 500
    assert "Dataset fetch" in str(exc.value)


@pytest.mark.asyncio
async def test_start_without_run_id(make_client):
    client, _ = make_client([ok({"data": {"status": "READY"}})])
    with pytest.raises(TransportError, match="no run id"):
        await client.run(JobRequest("actor-1", {}, ASYNC))


def test_missing_token_is_configuration_error():
    with pytest.raises(ConfigurationError, match="APIFY_TOKEN"):
        ActorClient("")


def test_unknown_mode_is_rejected():
    with pytest.raises(ConfigurationError, match="Unknown run mode"):
        JobRequest("actor-1", {}, "batch")


def test_run_terminal_states():
    assert not JobRun("r", "RUNNING").terminal
    assert not JobRun("r", "READY").terminal
    assert JobRun("r", "SUCCEEDED").terminal
    assert JobRun("r", "TIMED-OUT").terminal


def test_actor_path_keeps_username_separator(make_client):
    client, _ = make_client([])
    assert client._url("misceres~indeed-scraper", "runs").endswith("/acts/misceres~indeed-scraper/runs")
