from kiwiland.graph import DEFAULT_EDGE_TOKENS, RailwayGraph
from kiwiland.services import RailwayQueryService
from start import run_demo


def test_demo_prints_reference_answers():
    service = RailwayQueryService(graph=RailwayGraph.from_tokens(DEFAULT_EDGE_TOKENS))

    assert run_demo(service) == [
        "Output #1: 9",
        "Output #2: 5",
        "Output #3: 13",
        "Output #4: 22",
        "Output #5: NO SUCH ROUTE",
        "Output #6: 2",
        "Output #7: 3",
        "Output #8: 9",
        "Output #9: 9",
        "Output #10: 7",
    ]
