"""Example: Voronoi edges of a few random sites."""

import numpy as np

from fortune_voronoi import compute_voronoi, edges_to_array, voronoi_vertices


def main() -> None:
    rng = np.random.default_rng(123)
    sites = rng.uniform(0.0, 10.0, size=(12, 2))
    edges = compute_voronoi(sites)
    print("Edges:", len(edges))
    for edge in edges:
        (x0, y0), (x1, y1) = edge.start, edge.end
        print(f"  {edge.site1.index:2d}|{edge.site2.index:2d}: ({x0:.3f}, {y0:.3f}) -> ({x1:.3f}, {y1:.3f})")
    print("Vertices:", len(voronoi_vertices(edges)))
    print("Array shape:", edges_to_array(edges).shape)


if __name__ == "__main__":
    main()
