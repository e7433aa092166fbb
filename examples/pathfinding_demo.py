from hex_tactics import GridIndex, HexOrientation, ParityRule, Pathfinder, UnitState

width, height = 10, 10
grid = GridIndex.rectangle(
    width,
    height,
    orientation=HexOrientation.FLAT_TOP,
    parity=ParityRule.ODD_SHIFTED,
    movement_costs={(2, 2): 4, (3, 2): 4},
)

for index, coord in enumerate([(1, 0), (2, 1), (3, 1)]):
    grid.place(UnitState(f"blocker-{index}", is_enemy=True), coord)


if __name__ == "__main__":
    pf = Pathfinder(grid)
    path = pf.find_path(grid.require((0, 0)), grid.require((5, 2)))
    print("path:", [tile.coord for tile in path] if path else None)
    print("cost:", pf.path_cost(path) if path else None)
