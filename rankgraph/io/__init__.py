from rankgraph.io.edge_list import EdgeListStats, load_edge_list, parse_edge_lines

__all__ = ["EdgeListStats", "load_edge_list", "parse_edge_lines"]
