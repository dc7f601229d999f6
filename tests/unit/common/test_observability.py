import io
import json

import pytest

from rankgraph.common.exceptions import ConfigurationError, GraphInvariantError, RankGraphError
from rankgraph.common.observability import LogPerformance, get_logger, setup_logging


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, RankGraphError)
        assert issubclass(GraphInvariantError, RankGraphError)

    def test_str_includes_details(self):
        error = ConfigurationError("bad damping", details={"damping": 2.0})

        assert error.message == "bad damping"
        assert str(error) == "bad damping (details: {'damping': 2.0})"

    def test_str_without_details(self):
        assert str(RankGraphError("boom")) == "boom"
        assert RankGraphError("boom").details == {}


class TestLogging:
    def test_json_output(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="json", include_timestamp=False, stream=stream)

        get_logger("rankgraph.test").info("pagerank_converged", iterations=3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "pagerank_converged"
        assert record["iterations"] == 3
        assert record["level"] == "info"

    def test_level_filtering(self):
        stream = io.StringIO()
        setup_logging(level="WARNING", format="json", stream=stream)

        get_logger("rankgraph.test").info("hidden")

        assert stream.getvalue() == ""

    def test_log_performance_success(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="json", include_timestamp=False, stream=stream)

        with LogPerformance(get_logger("rankgraph.test"), "load_edge_list", source="stdin"):
            pass

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["operation"] == "load_edge_list"
        assert record["source"] == "stdin"
        assert "duration_ms" in record

    def test_log_performance_failure_does_not_swallow(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="json", include_timestamp=False, stream=stream)

        with pytest.raises(ValueError):
            with LogPerformance(get_logger("rankgraph.test"), "load_edge_list"):
                raise ValueError("bad line")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "load_edge_list_failed"
        assert record["error_type"] == "ValueError"
