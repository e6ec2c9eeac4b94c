from dialogkit.core.selection import PickerState, reconcile, should_auto_confirm


def test_reconcile_drops_empty_and_duplicates():
    assert reconcile((), ['a', '', 'a', 'b']) == ('a', 'b')


def test_reconcile_single_select_keeps_first():
    assert reconcile((), ['b', 'a'], multi_select=False) == ('b',)
    assert reconcile((), 'a', multi_select=False) == ('a',)


def test_reconcile_none_keeps_current():
    assert reconcile(('x',), None) == ('x',)
    assert reconcile(('x',), []) == ()


def test_should_auto_confirm():
    assert should_auto_confirm(True, False, True) is False
    assert should_auto_confirm(True, True, True) is True
    assert should_auto_confirm(True, False, False) is True
    assert should_auto_confirm(True, True, False) is False
    assert should_auto_confirm(False, False, False) is False
    # Object pickers report no folder flag
    assert should_auto_confirm(True, None, False) is True


def test_picker_state_select_and_confirm():
    state = PickerState.open(['a', '', 'a', 'b'], multi_select=True)
    assert state.selected == ('a', 'b')
    assert state.can_confirm()
    assert state.confirm_value() == ['a', 'b']

    state, auto = state.apply_select(['c'], is_double_click=True, is_folder=False)
    assert auto
    assert state.confirm_value() == ['c']


def test_picker_state_single_value():
    state = PickerState.open()
    assert not state.can_confirm()
    assert state.confirm_value() == ''

    state, auto = state.apply_select('a', display_name='Alpha')
    assert not auto
    assert state.confirm_value() == 'a'
    assert state.display_name == 'Alpha'


def test_folder_only_picker():
    state = PickerState.open(select_only_folders=True)
    state, auto = state.apply_select(['/data/file.txt'], is_double_click=True, is_folder=False)
    assert not auto
    assert not state.can_confirm()

    state, auto = state.apply_select(['/data'], is_double_click=True, is_folder=True)
    assert auto
    assert state.can_confirm()


def test_clear():
    state = PickerState.open('a').clear()
    assert state.selected == ()
    assert not state.can_confirm()
