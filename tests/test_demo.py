from arithmetic_tree import demo, Literal, Add, Divide


def test_build_demo_tree():
  tree = demo.build_demo_tree()
  assert tree.render() == demo.EXPECTED_RENDERING
  assert tree.evaluate() == demo.EXPECTED_VALUE


def test_run_demo_succeeds():
  assert demo.run_demo() is True
  assert demo.main() == 0


def test_run_demo_reports_wrong_rendering(monkeypatch):
  monkeypatch.setattr(demo, "build_demo_tree", lambda: Add(Literal(1), Literal(1)))
  assert demo.run_demo() is False
  assert demo.main() == 1


def test_run_demo_reports_wrong_value(monkeypatch):
  monkeypatch.setattr(demo, "EXPECTED_RENDERING", "(1 + 2)")
  monkeypatch.setattr(demo, "build_demo_tree", lambda: Add(Literal(1), Literal(2)))
  assert demo.run_demo() is False


def test_run_demo_reports_construction_errors(monkeypatch):
  monkeypatch.setattr(demo, "build_demo_tree", lambda: Divide(Literal(1), Literal(0)))
  assert demo.run_demo() is False
