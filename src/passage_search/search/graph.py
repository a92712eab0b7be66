"""LangGraph search pipeline wiring.

State flows:

  START -> [route_provider]
                |
      +---------+-----------+
      |                     |
  (available)          (unavailable)
      |                     |
  generate_queries    provider_unavailable
      |                     |
   fan_out                  |
      |                     |
  dedupe_results            |
      |                     |
      +----> log_search <---+
                 |
                END
"""

from langgraph.graph import END, START, StateGraph

from passage_search.search.nodes import SearchNodes
from passage_search.search.state import SearchState


def build_graph(nodes: SearchNodes):
    """Construct and compile the search graph.  Returns a runnable."""
    g = StateGraph(SearchState)

    # -- add nodes ----------------------------------------------------------
    g.add_node("provider_unavailable", nodes.provider_unavailable)
    g.add_node("generate_queries", nodes.generate_queries)
    g.add_node("fan_out", nodes.fan_out)
    g.add_node("dedupe_results", nodes.dedupe_results)
    g.add_node("log_search", nodes.log_search)

    # -- edges --------------------------------------------------------------
    g.add_conditional_edges(
        START,
        nodes.route_provider,
        {
            "available": "generate_queries",
            "unavailable": "provider_unavailable",
        },
    )

    g.add_edge("generate_queries", "fan_out")
    g.add_edge("fan_out", "dedupe_results")
    g.add_edge("dedupe_results", "log_search")
    g.add_edge("provider_unavailable", "log_search")
    g.add_edge("log_search", END)

    return g.compile()
