from __future__ import annotations

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError

from ecsresolve.executor import Failure, classify, describe_code, invoke

pytestmark = [pytest.mark.unit]


def _raise(exc: Exception):
    def call():
        raise exc
    return call


def _client_error(code: str, message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "ListClusters")


class TestInvoke:
    def test_success_returns_value_unchanged(self, log_records):
        value = {"clusterArns": ["a"]}
        assert invoke("ecs.list_clusters", lambda: value) is value
        assert log_records == []

    def test_service_error_returns_none_and_logs_code(self, log_records):
        exc = _client_error("ClusterNotFoundException", "Cluster not found.")
        assert invoke("ecs.list_services", _raise(exc)) is None

        assert len(log_records) == 1
        record = log_records[0]
        assert record["level"].name == "ERROR"
        assert record["extra"]["code"] == "ClusterNotFoundException"
        assert record["extra"]["operation"] == "ecs.list_services"
        assert "ClusterNotFoundException" in record["message"]
        assert "cluster not found" in record["message"]

    def test_unknown_service_code_is_still_reported(self, log_records):
        assert invoke("ec2.describe_instances", _raise(_client_error("Throttling"))) is None
        assert log_records[0]["extra"]["code"] == "Throttling"

    def test_generic_error_falls_back_to_raw_text(self, log_records):
        exc = EndpointConnectionError(endpoint_url="https://ecs.us-east-1.amazonaws.com/")
        assert invoke("ecs.list_clusters", _raise(exc)) is None

        assert len(log_records) == 1
        record = log_records[0]
        assert record["extra"]["code"] is None
        assert str(exc) in record["message"]

    def test_credentials_error_is_generic(self, log_records):
        assert invoke("ecs.list_clusters", _raise(NoCredentialsError())) is None
        assert "Unable to locate credentials" in log_records[0]["message"]

    def test_programming_errors_propagate(self):
        with pytest.raises(ZeroDivisionError):
            invoke("ecs.list_clusters", lambda: 1 / 0)

    def test_no_retry(self):
        calls = []

        def call():
            calls.append(1)
            raise _client_error("ServerException")

        invoke("ecs.list_clusters", call)
        assert len(calls) == 1


class TestClassify:
    def test_client_error(self):
        failure = classify("ecs.list_clusters", _client_error("InvalidParameterException", "bad"))
        assert failure == Failure("ecs.list_clusters", "InvalidParameterException", "bad")
        assert failure.label == "invalid parameter"

    def test_client_error_without_code(self):
        failure = classify("ecs.list_clusters", ClientError({"Error": {}}, "ListClusters"))
        assert failure.code is None
        assert failure.label == "generic error"
        assert "ListClusters" in failure.message

    def test_botocore_error(self):
        failure = classify("ecs.list_clusters", NoCredentialsError())
        assert failure.code is None
        assert failure.message == "Unable to locate credentials"


class TestDescribeCode:
    @pytest.mark.parametrize(
        ("code", "label"),
        [
            ("ServerException", "server-side failure"),
            ("ClientException", "client-side failure"),
            ("ClusterNotFoundException", "cluster not found"),
            ("InvalidInstanceID.NotFound", "instance not found"),
            ("SomethingNew", "SomethingNew"),
        ],
    )
    def test_labels(self, code, label):
        assert describe_code(code) == label
