from npqgen.subgraph.subgraph import Subgraph
from npqgen.subgraph.subgraph_grower import SubgraphGrower

__all__ = ["Subgraph", "SubgraphGrower"]
