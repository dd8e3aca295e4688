"""Test if package imports successfully."""


def test1():
    import matcalc
    session = matcalc.Session()
    matcalc.do_command(['A', '=', '[[1,2],[3,4]]'], session)
    assert matcalc.do_command(['det', 'A'], session).at(0, 0) == -2
