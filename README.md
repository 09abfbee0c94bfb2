# elvisui

`elvisui` describes a user interface as a virtual tree of widgets and writes
it out as HTML markup and CSS declarations. It has no runtime dependencies.

## What's inside

- `elvisui.tree.Tree`: the virtual UI tree. A node has a `tag`, an `attrs`
  dictionary, a list of `children` and a weak link to its parent (`pre`).
  - `Tree.de(h)` reads a small subset of HTML (tags, double-quoted
    attributes, text); `Tree.ser()` writes a tree back as markup. Text nodes
    have the tag `plain` and keep their text in the `text` attribute; the
    function `plain(h, pre)` builds one.
  - `push`, `remove`, `drain` and `replace` edit a tree; `idx` gives every
    node without one an `id` attribute derived from its tag and position;
    `locate` returns the child indexes leading up to the root.
- `elvisui.unit.Unit` (with `UnitKind`): CSS lengths and plain numbers such
  as `1.0em`, `100.0%`, `42` or `inherit`. Read with `Unit.de` / `Unit.from_str`,
  write with `ser`. Two units are equal when they are written the same.
- `elvisui.color.Color`: the material-design palette (`Color.named("Red")`)
  and free opacity/RGB colours (`Color.orgb(o, r, g, b)`). Converts to and
  from hex (`to_hex`, `from_hex`, `from_hex_to_orgb`, `to_orgb`) and to and
  from `rgba(r, g, b, a)` text (`ser`, `de`).
- `elvisui.layout_values`: `Alignments`, `FlexBasis`, `FlexDirection`,
  `GridAuto`, `GridFlow`, `GridTemplate` and `MultiColumnLineStyle`, each
  with `de` and `ser` for its CSS form.
- `elvisui.styles`: `TextStyle`, `AlignStyle`, `ContainerStyle`,
  `SizedBoxStyle`, `FlexStyle`, `GridStyle` and `MultiColumnStyle`
  dataclasses, each reading CSS declarations with `de` and writing them with
  `ser`; `parse_style(s)` splits `key: value; ...` text into pairs.
- `elvisui.widgets`: the widgets `Text` and `Image` (with `ImageSrc`) and the
  layouts `Container`, `List`, `SizedBox`, `Align`, `Center`, `Col`, `Flex`,
  `Row`, `Grid` and `MultiColumn`. Each one turns into a `Tree` with
  `to_tree()`. `Text`, `Image`, `Container`, `SizedBox`, `Align`, `Grid` and
  `MultiColumn` can also be written to markup with `ser()` and read back with
  `de()`.
- `elvisui.state`: `State` holds a widget, a trigger and a string key/value
  store (`get`, `set`); `process(p)` calls the trigger. A trigger is a
  subclass of the abstract `FnBox` that implements `call(props)`.
- `elvisui.stylesheet.StyleSheet`: walks a tree with `batch`, moving each
  node's inline `style` attribute into an `#id` rule and adding the rules of
  the known widget classes (`elvis-center`, `elvis-col`, `elvis-flex`,
  `elvis-image`, `elvis-row`) as `.class` rules in its `table`.

Errors from reading markup, styles and values are raised as
`elvisui.errors.DeserializeHtmlError`, a subclass of both
`elvisui.errors.ElvisError` and `ValueError`. The module also defines
`FunctionError`, `SerializeHtmlError` and `NoneError`; `NoneError` is raised
when `drain` or `locate` finds that a node's parent no longer exists.

## Example

```python
from elvisui.color import Color
from elvisui.tree import Tree
from elvisui.unit import Unit
from elvisui.widgets import Row

tree = Tree.de("<div><p>hello</p></div>")
print(tree.ser())                    # <div><p>hello</p></div>

row = Row([Tree.de("<p>a</p>")])
print(row.to_tree().ser())           # <div class="elvis-row elvis-flex"><p>a</p></div>

print(Unit.de("1.0em").ser())        # 1.0em
print(Color.named("Red").ser())      # rgba(244, 67, 54, 1.0)
```

## What it does not do

`elvisui` only builds trees, markup strings and CSS rule text. It does not
run in or talk to a browser: it has no document to render into, does not
insert style sheets or patch existing pages, and has no command-line tool.
`StyleSheet` collects rules in a dictionary; putting them on a page is up to
the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```