"""DFS, BFS and A* over small graphs and mazes."""
import pytest

from statesearch.algorithms import ALGORITHMS, astar_search, breadth_first_search, depth_first_search, search
from statesearch.core.node import SearchTree
from statesearch.core.utils import node_to_path
from statesearch.problems.maze import Maze, euclidean_distance, manhattan_distance

LAYOUT = (
    "S    \n"
    " XXX \n"
    "     \n"
    " XXX \n"
    "    G\n"
)

WALLED_OFF = (
    "S  \n"
    "XXX\n"
    "  G\n"
)


def _zero(_state):
    return 0.0


def _run_all(maze):
    return {
        "dfs": depth_first_search(maze.start, maze.goal_test, maze.successors),
        "bfs": breadth_first_search(maze.start, maze.goal_test, maze.successors),
        "astar_manhattan": astar_search(maze.start, maze.goal_test, maze.successors,
                                        manhattan_distance(maze.goal)),
        "astar_euclidean": astar_search(maze.start, maze.goal_test, maze.successors,
                                        euclidean_distance(maze.goal)),
    }


def _assert_valid_path(maze, path):
    assert path[0] == maze.start
    assert maze.goal_test(path[-1])
    for prev, cur in zip(path, path[1:]):
        assert cur in maze.successors(prev)


def test_all_algorithms_solve_the_fixed_layout():
    maze = Maze.from_text(LAYOUT)
    results = _run_all(maze)
    paths = {name: node_to_path(node) for name, node in results.items()}
    for path in paths.values():
        _assert_valid_path(maze, path)
    assert len(paths["bfs"]) == 9
    assert len(paths["astar_manhattan"]) == 9
    assert len(paths["astar_euclidean"]) == 9
    assert len(paths["dfs"]) >= 9


def test_unreachable_goal_is_not_found_by_any_algorithm():
    maze = Maze.from_text(WALLED_OFF)
    assert all(node is None for node in _run_all(maze).values())


@pytest.mark.parametrize("seed", range(25))
def test_random_mazes_agree_on_reachability_and_optimality(seed):
    maze = Maze(10, 10, 0.25, seed=seed)
    results = _run_all(maze)
    found = {name: node is not None for name, node in results.items()}
    assert len(set(found.values())) == 1

    if not found["bfs"]:
        return
    lengths = {}
    for name, node in results.items():
        path = node_to_path(node)
        _assert_valid_path(maze, path)
        lengths[name] = len(path)
    assert lengths["bfs"] <= lengths["dfs"]
    assert lengths["astar_manhattan"] == lengths["bfs"]
    assert lengths["astar_euclidean"] == lengths["bfs"]
    assert results["astar_manhattan"].cost == lengths["bfs"] - 1


@pytest.mark.parametrize("algorithm", [depth_first_search, breadth_first_search])
def test_each_state_is_generated_at_most_once(algorithm):
    maze = Maze(12, 12, 0.1, start=(0, 0), goal=(11, 11), seed=3)
    tree = SearchTree()
    algorithm(maze.start, maze.goal_test, maze.successors, tree=tree)
    states = [n.state for n in tree]
    assert len(states) == len(set(states))
    assert all(n.cost == 0.0 and n.heuristic == 0.0 for n in tree)


def test_goal_at_root_returns_root():
    for node in (
        depth_first_search(5, lambda s: s == 5, lambda s: [s + 1]),
        breadth_first_search(5, lambda s: s == 5, lambda s: [s + 1]),
        astar_search(5, lambda s: s == 5, lambda s: [s + 1], _zero),
    ):
        assert node_to_path(node) == [5]


def test_bfs_finds_fewest_steps_in_unbounded_space():
    # doubling or incrementing from 1; 10 is four steps away (1, 2, 4, 5, 10)
    node = breadth_first_search(1, lambda n: n == 10, lambda n: [n + 1, n * 2])
    path = node_to_path(node)
    assert len(path) == 5
    assert path[0] == 1 and path[-1] == 10
    assert len(node_to_path(astar_search(1, lambda n: n == 10, lambda n: [n + 1, n * 2], _zero))) == 5


def test_astar_cost_counts_one_per_step_by_default():
    maze = Maze.from_text(LAYOUT)
    node = astar_search(maze.start, maze.goal_test, maze.successors, manhattan_distance(maze.goal))
    costs = []
    while node is not None:
        costs.append(node.cost)
        node = node.parent_node()
    assert costs == [float(c) for c in range(len(costs) - 1, -1, -1)]


def test_astar_with_step_costs_prefers_the_cheaper_longer_route():
    weights = {("A", "B"): 1, ("B", "D"): 1, ("A", "D"): 5}
    graph = {"A": ["D", "B"], "B": ["D"], "D": []}
    node = astar_search("A", lambda s: s == "D", graph.__getitem__, _zero,
                        step_cost=lambda s, t: weights[(s, t)])
    assert node_to_path(node) == ["A", "B", "D"]
    assert node.cost == 2
    # unit cost takes the direct edge
    assert node_to_path(breadth_first_search("A", lambda s: s == "D", graph.__getitem__)) == ["A", "D"]


def test_astar_rejects_negative_step_cost():
    with pytest.raises(ValueError):
        astar_search(0, lambda s: s == 3, lambda s: [s + 1], _zero, step_cost=lambda s, t: -1)


@pytest.mark.parametrize("name", ["dfs", "bfs", "astar"])
def test_expansion_budget_stops_the_search(name):
    maze = Maze(20, 20, start=(0, 0), goal=(19, 19), blocked=[])
    tree = SearchTree()
    node = search(maze, name, max_expansions=3, tree=tree)
    assert node is None
    assert tree.expanded == 3


def test_search_registry_uses_problem_heuristic():
    maze = Maze.from_text(LAYOUT)
    assert set(ALGORITHMS) == {"dfs", "bfs", "astar"}
    assert len(node_to_path(search(maze, "astar"))) == 9
    assert len(node_to_path(search(maze))) == 9


def test_search_registry_errors():
    class Line:
        def initial_state(self): return 0
        def goal_test(self, s): return s == 2
        def successors(self, s): return [s + 1]

    with pytest.raises(KeyError):
        search(Line(), "dijkstra")
    with pytest.raises(TypeError):
        search(Line(), "astar")
    assert node_to_path(search(Line(), "astar", heuristic=_zero)) == [0, 1, 2]


def test_callback_exceptions_propagate():
    def boom(_state):
        raise RuntimeError("bad successor")

    with pytest.raises(RuntimeError):
        breadth_first_search(0, lambda s: False, boom)
