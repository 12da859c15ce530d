import pytest

from rubikscube import (
    MOVES,
    SOLVED_COLORS,
    Cube_Color,
    Face,
    Moves,
    UnsupportedMove,
    apply_algorithm,
    apply_move,
    generate_scramble,
    rotate_face_clockwise,
    rotate_face_counter_clockwise,
    solved_cube,
)

QUARTER_MOVES = ["U", "D", "R", "L", "F", "B"]


@pytest.fixture
def scrambled():
    return apply_algorithm(solved_cube(), generate_scramble(30, seed=42))


def column(cube, face, col):
    return [cube.state[face][row][col] for row in range(3)]


def test_rotate_face_clockwise():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_face_clockwise(grid) == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]
    assert grid == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_rotate_face_counter_clockwise():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_face_counter_clockwise(grid) == [[3, 6, 9], [2, 5, 8], [1, 4, 7]]


def test_apply_move_does_not_mutate_input():
    cube = solved_cube()
    apply_move(cube, "R")
    assert cube == solved_cube()


def test_U_band():
    cube = apply_move(solved_cube(), "U")
    assert cube.state[Face.Front][0] == [Cube_Color.Red] * 3
    assert cube.state[Face.Right][0] == [Cube_Color.Blue] * 3
    assert cube.state[Face.Back][0] == [Cube_Color.Orange] * 3
    assert cube.state[Face.Left][0] == [Cube_Color.Green] * 3
    assert cube.state[Face.Front][1] == [Cube_Color.Green] * 3
    assert cube.state[Face.Up] == solved_cube().state[Face.Up]


def test_D_band():
    cube = apply_move(solved_cube(), "D")
    assert cube.state[Face.Front][2] == [Cube_Color.Orange] * 3
    assert cube.state[Face.Right][2] == [Cube_Color.Green] * 3
    assert cube.state[Face.Back][2] == [Cube_Color.Red] * 3
    assert cube.state[Face.Left][2] == [Cube_Color.Blue] * 3


def test_R_band():
    cube = apply_move(solved_cube(), "R")
    assert column(cube, Face.Front, 2) == [Cube_Color.Yellow] * 3
    assert column(cube, Face.Up, 2) == [Cube_Color.Green] * 3
    assert column(cube, Face.Back, 0) == [Cube_Color.White] * 3
    assert column(cube, Face.Down, 2) == [Cube_Color.Blue] * 3
    assert column(cube, Face.Front, 1) == [Cube_Color.Green] * 3


def test_L_band():
    cube = apply_move(solved_cube(), "L")
    assert column(cube, Face.Front, 0) == [Cube_Color.White] * 3
    assert column(cube, Face.Down, 0) == [Cube_Color.Green] * 3
    assert column(cube, Face.Back, 2) == [Cube_Color.Yellow] * 3
    assert column(cube, Face.Up, 0) == [Cube_Color.Blue] * 3


def test_F_band():
    cube = apply_move(solved_cube(), "F")
    assert cube.state[Face.Up][2] == [Cube_Color.Orange] * 3
    assert column(cube, Face.Right, 0) == [Cube_Color.White] * 3
    assert cube.state[Face.Down][0] == [Cube_Color.Red] * 3
    assert column(cube, Face.Left, 2) == [Cube_Color.Yellow] * 3


def test_B_band():
    cube = apply_move(solved_cube(), "B")
    assert cube.state[Face.Up][0] == [Cube_Color.Red] * 3
    assert column(cube, Face.Left, 0) == [Cube_Color.White] * 3
    assert cube.state[Face.Down][2] == [Cube_Color.Orange] * 3
    assert column(cube, Face.Right, 2) == [Cube_Color.Yellow] * 3


def test_R_band_reverses_back_column():
    cube = solved_cube()
    cube.set_facelet(Face.Up, 0, 2, Cube_Color.Red)
    cube.set_facelet(Face.Back, 0, 0, Cube_Color.Green)
    cube.set_facelet(Face.Down, 0, 2, Cube_Color.Orange)

    cube = apply_move(cube, "R")
    assert cube.get_facelet(Face.Back, 2, 0) == Cube_Color.Red
    assert cube.get_facelet(Face.Down, 2, 2) == Cube_Color.Green
    assert cube.get_facelet(Face.Front, 0, 2) == Cube_Color.Orange


def test_turned_face_rotates():
    cube = solved_cube()
    cube.set_facelet(Face.Front, 0, 0, Cube_Color.Red)
    cube = apply_move(cube, "F")
    assert cube.get_facelet(Face.Front, 0, 2) == Cube_Color.Red

    cube = solved_cube()
    cube.set_facelet(Face.Front, 0, 0, Cube_Color.Red)
    cube = apply_move(cube, "F'")
    assert cube.get_facelet(Face.Front, 2, 0) == Cube_Color.Red


@pytest.mark.parametrize("move", MOVES)
def test_move_leaves_opposite_face_and_centers_alone(move):
    cube = apply_algorithm(solved_cube(), generate_scramble(30, seed=7))
    moved = apply_move(cube, move)
    turned = {face.symbol: face for face in Face}[move[0]]
    assert moved.state[turned.opposite] == cube.state[turned.opposite]
    for face in Face:
        assert moved.state[face][1][1] == cube.state[face][1][1]
    assert moved.is_valid()


@pytest.mark.parametrize("move", QUARTER_MOVES)
def test_quarter_move_has_order_four(scrambled, move):
    cube = scrambled
    for loop1 in range(4):
        cube = apply_move(cube, move)
        if loop1 < 3:
            assert cube != scrambled
    assert cube == scrambled


@pytest.mark.parametrize("move", QUARTER_MOVES)
def test_half_move_has_order_two(scrambled, move):
    cube = apply_move(apply_move(scrambled, move + "2"), move + "2")
    assert cube == scrambled


@pytest.mark.parametrize("move", QUARTER_MOVES)
def test_double_is_two_quarter_turns(scrambled, move):
    assert apply_move(scrambled, move + "2") == apply_move(apply_move(scrambled, move), move)


@pytest.mark.parametrize("move", QUARTER_MOVES)
def test_prime_is_three_quarter_turns(scrambled, move):
    expected = apply_move(apply_move(apply_move(scrambled, move), move), move)
    assert apply_move(scrambled, move + "'") == expected
    assert apply_move(apply_move(scrambled, move), move + "'") == scrambled


def test_R_four_times_on_solved_cube():
    cube = solved_cube()
    for loop1 in range(4):
        cube = apply_move(cube, "R")
    assert cube == solved_cube()


def test_opposite_faces_commute(scrambled):
    for first, second in [("U", "D"), ("R", "L"), ("F", "B")]:
        assert apply_algorithm(scrambled, [first, second]) == apply_algorithm(
            scrambled, [second, first]
        )


def test_adjacent_faces_do_not_commute():
    assert apply_algorithm(solved_cube(), "R U") != apply_algorithm(solved_cube(), "U R")


def test_sexy_move_has_order_six():
    cube = solved_cube()
    for loop1 in range(6):
        cube = apply_algorithm(cube, "R U R' U'")
        if loop1 < 5:
            assert not cube.is_solved()
    assert cube == solved_cube()


def test_checkerboard_pattern():
    cube = apply_algorithm(solved_cube(), "U2 D2 F2 B2 L2 R2")
    for face in Face:
        own = SOLVED_COLORS[face]
        other = SOLVED_COLORS[face.opposite]
        grid = cube.state[face]
        for row in range(3):
            for col in range(3):
                expected = own if (row + col) % 2 == 0 else other
                assert grid[row][col] == expected


def test_scramble_then_inverse_returns_to_solved():
    for seed in range(5):
        scramble = generate_scramble(25, seed=seed)
        cube = apply_algorithm(solved_cube(), scramble)
        assert apply_algorithm(cube, scramble.inverse()) == solved_cube()


def test_apply_move_accepts_single_move_object():
    assert apply_move(solved_cube(), Moves("F")) == apply_move(solved_cube(), "F")
    with pytest.raises(UnsupportedMove):
        apply_move(solved_cube(), Moves("F R"))


@pytest.mark.parametrize("move", ["X", "r", "U3", "", "R'2", None, 3])
def test_unsupported_move_raises(move):
    with pytest.raises(UnsupportedMove) as err:
        apply_move(solved_cube(), move)
    assert err.value.move == move


def test_apply_algorithm_empty_is_identity(scrambled):
    assert apply_algorithm(scrambled, []) == scrambled
    assert apply_algorithm(scrambled, Moves()) == scrambled
    assert apply_algorithm(scrambled, "") == scrambled


def test_apply_algorithm_runs_left_to_right():
    cube = solved_cube()
    expected = apply_move(apply_move(apply_move(cube, "F"), "R"), "U'")
    assert apply_algorithm(cube, ["F", "R", "U'"]) == expected
    assert cube.apply_moves("F R U'") == expected


def test_apply_algorithm_rejects_bad_text():
    with pytest.raises(UnsupportedMove):
        apply_algorithm(solved_cube(), "R Q U")
