# logicchips

Truth tables for a handful of common logic ICs from the 4000 and 7400
series: NAND, NOR, AND, inverter and buffer packages.

## Command line

Print the truth tables of every gate section of one or more parts:

```
logicchips 7400
logicchips 7404 7408
```

List the part numbers that are known:

```
logicchips --list
```

Each gate section is printed as a heading followed by one line per input
combination, lowest first, for example:

```
NAND 1

A1 : 0	B1 : 0	Y1 : 1
A1 : 0	B1 : 1	Y1 : 1
A1 : 1	B1 : 0	Y1 : 1
A1 : 1	B1 : 1	Y1 : 0
```

Sections of the three-input parts 7410 and 7411 follow one another
without blank lines between them. An unknown part number, or no part
number at all, is reported as a usage error.

## Library

`logicchips.gates` holds the gate functions. Each works on the least
significant bit of its inputs and returns 0 or 1; `nand`, `nor` and
`and_` take any number of inputs (at least one, otherwise `TypeError`).

```python
from logicchips.gates import nand, nor, and_, not_, buffer

nand(1, 1)      # 0
nor(0, 0, 0)    # 1
and_(1, 1, 1)   # 1
not_(0)         # 1
buffer(1)       # 1
```

`logicchips.chips` describes whole parts:

```python
from logicchips.chips import get_chip, available_parts

print(available_parts())
chip = get_chip("7410")
print(chip.render())
```

`get_chip` accepts a part number as a string or an integer and raises
`ValueError` for an unknown part. A `Chip` holds a tuple of `Section`
objects, one per gate in the package; `Section.rows()` returns its truth
table as `(inputs, output)` pairs and `Section.render()` its text form.
`Chip.render()` joins the text of all its sections.

## Supported parts

4000, 4001, 7400, 7401, 7402, 7403, 7404, 7405, 7406, 7407, 7408, 7409,
7410 and 7411.

## What it does not do

Only the logic function of each gate is modelled. There are no pinouts,
no electrical or timing characteristics (open-collector and
high-voltage outputs behave like ordinary ones), and no way to wire
gates together into circuits.