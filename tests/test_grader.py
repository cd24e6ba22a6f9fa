import pytest

from bstmap.grader import (
    CheckFailed,
    Palabra,
    create_test1,
    erase_test1,
    erase_test2,
    erase_test3,
    first_test1,
    first_test2,
    initialize_tree,
    insert_test1,
    insert_test2,
    lower_than_int,
    main,
    minimum_test,
    next_test1,
    next_test2,
    next_test3,
    search_test1,
    search_test2,
    search_test3,
    search_test4,
    ub_test1,
    ub_test2,
    ub_test3,
    ub_test4,
)
from bstmap.treemap import TreeMap


def test_lower_than_int_orders_numbers():
    assert lower_than_int(10, 15) is True
    assert lower_than_int(15, 10) is False
    assert lower_than_int(7, 7) is False


def test_initialize_tree_shape():
    tree = initialize_tree()
    assert [pair.key for pair in tree] == [1273, 5239, 6980, 8213]
    assert [pair.value.word for pair in tree] == ["reto", "auto", "hoja", "rayo"]
    assert tree.root.right.left.parent is tree.root.right
    assert tree.root.left.parent is tree.root


def test_initialize_tree_prints_info(capsys):
    initialize_tree()
    assert "[ INFO ] inicializando el arbol..." in capsys.readouterr().out


def test_create_test1_reports_ok(capsys):
    create_test1()
    out = capsys.readouterr().out
    assert "[OK] root==NULL" in out
    assert "[OK] createTreeMap retorna un objeto" in out


def test_search_tests_pass_and_move_cursor(capsys):
    tree = initialize_tree()
    search_test1(tree)
    search_test2(tree)
    search_test3(tree)
    search_test4(tree)
    out = capsys.readouterr().out
    assert "[OK] encuentra dato con clave 6980" in out
    assert "[OK] retorna NULL: search(key=7010)" in out
    assert tree.current is tree.root.right.left


def test_search_test4_fails_when_key_present():
    tree = initialize_tree()
    tree.insert(7010, Palabra(7010, "extra"))
    with pytest.raises(CheckFailed, match="7010"):
        search_test4(tree)


def test_search_test1_fails_on_empty_tree():
    with pytest.raises(CheckFailed, match="no encuentra dato con clave 5239"):
        search_test1(TreeMap(lower_than_int))


def test_insert_test1_keeps_original_value(capsys):
    tree = initialize_tree()
    insert_test1(tree)
    assert tree.search(1273).value.word == "reto"
    assert "[OK] no inserta dato repetido" in capsys.readouterr().out


def test_insert_test1_fails_when_node_has_child():
    tree = initialize_tree()
    tree.insert(900, Palabra(900, "maicol"))
    with pytest.raises(CheckFailed, match="se inserta dato repetido"):
        insert_test1(tree)


def test_insert_test2_reports_ok(capsys):
    insert_test2()
    out = capsys.readouterr().out
    assert "[OK] dato insertado correctamente" in out
    assert "[OK] current actualizado correctamente" in out


def test_minimum_test_reports_both_minimums(capsys):
    minimum_test()
    out = capsys.readouterr().out
    assert "minimum retorna el nodo con clave 1273" in out
    assert "minimum retorna el nodo con clave 100" in out


@pytest.mark.parametrize("check", [erase_test1, erase_test2, erase_test3])
def test_erase_tests_report_ok(check, capsys):
    check()
    assert "[OK] dato eliminado correctamente" in capsys.readouterr().out


def test_first_test1_passes_on_fixed_tree(capsys):
    first_test1(initialize_tree())
    assert "[OK] first retorna nodo 1273" in capsys.readouterr().out


def test_first_test1_fails_after_erasing_smallest():
    tree = initialize_tree()
    tree.erase(1273)
    with pytest.raises(CheckFailed, match="first no retorna nodo 1273"):
        first_test1(tree)


def test_first_test1_fails_on_empty_tree():
    with pytest.raises(CheckFailed, match="first retorna NULL"):
        first_test1(TreeMap(lower_than_int))


def test_first_test2_reports_ok(capsys):
    first_test2()
    assert "[OK] first retorna nodo 100" in capsys.readouterr().out


def test_next_tests_report_ok(capsys):
    next_test1()
    next_test2()
    next_test3()
    out = capsys.readouterr().out
    assert "[OK] next retorna nodo 2000" in out
    assert "[OK] next retorna NULL" in out
    assert "[OK] next retorna nodo 5239" in out


def test_upper_bound_tests_pass(capsys):
    tree = initialize_tree()
    ub_test1(tree)
    ub_test2(tree)
    ub_test3(tree)
    ub_test4(tree)
    out = capsys.readouterr().out
    assert "upperbound de 6979 retorna 6980" in out
    assert "upperbound de 6981 retorna 8213" in out
    assert "upperbound de 8214 retona NULL" in out


def test_ub_test4_fails_with_larger_key():
    tree = initialize_tree()
    tree.insert(9000, Palabra(9000, "mayor"))
    with pytest.raises(CheckFailed):
        ub_test4(tree)


def test_ub_test1_fails_on_empty_tree():
    with pytest.raises(CheckFailed, match="upperbound de 6980 retorna NULL"):
        ub_test1(TreeMap(lower_than_int))


def test_main_full_run_scores_everything(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("total_score: 70/70")
    assert "partial_score: 15/15" in out
    assert "[FAILED]" not in out


def test_main_selected_erase_check_stops_with_success(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().splitlines()[-1] == "SUCCESS"
    assert "Test minimum..." in out
    assert "Test createTreeMap..." not in out
    assert "total_score" not in out


def test_main_first_check_succeeds_before_scores(capsys):
    assert main(["0"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().splitlines()[-1] == "SUCCESS"
    assert "partial_score" not in out


def test_main_unknown_id_runs_only_minimum(capsys):
    assert main(["12"]) == 0
    out = capsys.readouterr().out
    assert "Test minimum..." in out
    assert "SUCCESS" not in out
    assert "total_score" not in out
    assert "partial_score" not in out