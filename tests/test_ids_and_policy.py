from flowpad.core.ids import IdGenerator
from flowpad.core.ir import FALSE_HANDLE, TRUE_HANDLE
from flowpad.core.policy import ConnectionPolicy


class TestIdGenerator:

    def test_prefix_and_counter(self):
        ids = IdGenerator("node_")
        assert [ids.next() for _ in range(3)] == ["node_0", "node_1", "node_2"]

    def test_n_calls_yield_n_distinct_values(self):
        ids = IdGenerator()
        values = [ids.next() for _ in range(500)]
        assert len(set(values)) == 500

    def test_generators_are_independent(self):
        """Two generators never share a counter."""
        a = IdGenerator("node_")
        b = IdGenerator("node_")
        a.next()
        a.next()
        assert b.next() == "node_0"

    def test_iterator_protocol(self):
        ids = IdGenerator("x", start=5)
        assert next(ids) == "x5"


class TestConnectionPolicy:

    def test_false_branch_is_no(self):
        assert ConnectionPolicy().label_for(FALSE_HANDLE) == "No"

    def test_true_branch_is_yes(self):
        assert ConnectionPolicy().label_for(TRUE_HANDLE) == "Yes"

    def test_other_handles_have_no_label(self):
        policy = ConnectionPolicy()
        assert policy.label_for("a") is None
        assert policy.label_for("b") is None
        assert policy.label_for("") is None
        assert policy.label_for(None) is None
