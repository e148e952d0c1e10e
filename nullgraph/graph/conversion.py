"""Conversion between scipy sparse adjacency matrices and rewirable multigraphs."""

import numpy as np
import networkx as nx
import scipy.sparse


def graph_from_adjacency(
    adj: scipy.sparse.spmatrix | np.ndarray, directed: bool = True
) -> nx.MultiGraph:
    """Build a multigraph from an adjacency matrix.

    Entry ``adj[i, j]`` is read as an integer edge multiplicity. For
    undirected graphs only the upper triangle (diagonal included) is read.

    Args:
        adj: Square adjacency matrix (n x n).
        directed: Build a MultiDiGraph if True, else a MultiGraph.

    Returns:
        Multigraph over vertices ``0..n-1``.

    Raises:
        ValueError: If the matrix is not square or holds negative entries.
    """
    coo = scipy.sparse.coo_matrix(adj)
    n, n_cols = coo.shape
    if n != n_cols:
        raise ValueError(f"Adjacency matrix must be square, got {coo.shape}")
    if coo.nnz and coo.data.min() < 0:
        raise ValueError("Adjacency matrix has negative entries")

    g = nx.MultiDiGraph() if directed else nx.MultiGraph()
    g.add_nodes_from(range(n))

    counts = np.rint(coo.data).astype(np.int64)
    for i, j, c in zip(coo.row.tolist(), coo.col.tolist(), counts.tolist()):
        if not directed and i > j:
            continue
        for _ in range(c):
            g.add_edge(i, j)
    return g


def graph_to_adjacency(g: nx.Graph) -> scipy.sparse.csr_matrix:
    """Return the edge-multiplicity adjacency matrix of ``g``.

    Vertices are ordered as ``g.nodes``. Undirected graphs give a symmetric
    matrix; a self-loop contributes 1 on the diagonal.
    """
    index = {v: i for i, v in enumerate(g.nodes)}
    n = len(index)
    rows = []
    cols = []
    for u, v in g.edges():
        rows.append(index[u])
        cols.append(index[v])
        if not g.is_directed() and u != v:
            rows.append(index[v])
            cols.append(index[u])
    data = np.ones(len(rows), dtype=np.float64)
    # duplicate (row, col) pairs are summed, giving multiplicities
    return scipy.sparse.csr_matrix(
        (data, (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64))),
        shape=(n, n),
    )
