# classicds

Classic data structures and small value types in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `classicds.date` | `Date` with day arithmetic and comparisons, `days_in_month`, `parse_date` |
| `classicds.fraction` | `Fraction` with `simplify` and `+ - * /`, `parse_fraction` |
| `classicds.inventory` | `Stock` and its kinds `Shirt`, `Cap` and `Capboard` |
| `classicds.vector` | `Vector`, a growable array that tracks its capacity |
| `classicds.linked_list` | `LinkedList`, a circular doubly linked list with a sentinel node |
| `classicds.hashtable` | `HashTable` with separate chaining, `HashMap`, `HashSet`, `default_hash`, `string_hash` |
| `classicds.rbtree` | `RedBlackTree`, `TreeSet`, `TreeMap`, `Color`, and the comparisons `less` and `greater` |
| `classicds.containers` | `Stack`, `Queue`, `PriorityQueue`, `TwoStackQueue` |
| `classicds.calculator` | `calculate`, an integer expression evaluator |
| `classicds.digits` | `is_good_number`, `count_good_numbers` |

## Dates

`Date(year, month, day)` (defaults `2025, 1, 8`) is mutable. `+`, `-`, `+=`
and `-=` take a number of days and carry across month and year boundaries,
counting leap years by the Gregorian rule. `increment()` and `decrement()`
move the date by one day in place and return it. `str()` gives
`year.month.day`. The constructor does not check that the date is valid.

```python
from classicds.date import Date, days_in_month, parse_date

d = Date(2024, 2, 28)
assert d + 1 == Date(2024, 2, 29)
assert days_in_month(2023, 2) == 28
assert Date(2025, 1, 1) > Date(2024, 12, 31)
assert str(parse_date("2006 4 1").decrement()) == "2006.3.31"
```

`days_in_month` raises `ValueError` for a month outside 1..12, and
`parse_date` raises `ValueError` unless given three integers.

## Fractions

A zero denominator raises `ZeroDivisionError`. Every arithmetic result is
reduced to lowest terms with a positive denominator.

```python
from classicds.fraction import Fraction, parse_fraction

assert str(Fraction(1, 2) + Fraction(1, 3)) == "5/6"
assert str(Fraction(1, 2) / Fraction(2, 3)) == "3/4"
assert str(parse_fraction("4/2")) == "2"
```

## Stock records

`Stock(area, unit_price, count)` has `in_storage(amount)`,
`out_storage(amount)` and `total_value()`. Taking out more than is held empties
the stock and raises `ValueError`. `Shirt`, `Cap` and `Capboard` add fields
for material, shape and colour.

## Sequences

`Vector` starts with the capacity of its initial items and doubles it
(from 2 when empty) whenever it is full. It offers `push_back`, `push_front`,
`pop_back`, `pop_front`, `insert`, `erase`, `front`, `back`, indexing,
`len()` and iteration; operations on an empty vector or a bad position raise
`IndexError`.

`LinkedList` offers the same kind of operations; `pop_back`, `pop_front` and
`erase` return the removed value, and `reversed()` walks it backwards.

## Hash tables

`HashTable` starts with ten buckets and doubles them when the number of
elements reaches the number of buckets. Strings are hashed with
`string_hash`, other keys with `default_hash`, unless a `hash_func` is given.

```python
from classicds.hashtable import HashMap, HashSet

seen = HashSet()
assert seen.insert("apple")
assert not seen.insert("apple")
assert "apple" in seen

ages = HashMap()
ages.insert("tom", 3)
assert ages.find("tom") == 3
assert list(ages) == [("tom", 3)]
```

`insert` never replaces an existing entry; it returns `False` instead.

## Ordered containers

`TreeSet` and `TreeMap` sit on a red-black tree and iterate in key order.
Pass `greater` to reverse the order.

```python
from classicds.rbtree import TreeMap, TreeSet, greater

counts = TreeMap()
counts["love"] = 4
counts["you"] = 3
counts["e"] = 6
assert list(counts.items()) == [("e", 6), ("love", 4), ("you", 3)]

descending = TreeSet(greater)
for n in (2, 11, 5):
    descending.insert(n)
assert list(descending) == [11, 5, 2]
```

`TreeMap[key]` raises `KeyError` for a missing key; assignment adds or
replaces. `RedBlackTree.height()` reports the longest root-to-leaf path and
`copy()` gives an independent tree. There is no removal from the trees.

## Stacks and queues

```python
from classicds.containers import PriorityQueue, Stack, TwoStackQueue

heap = PriorityQueue([3, 5, 7, 1, 0])
assert [heap.pop() for _ in range(len(heap))] == [0, 1, 3, 5, 7]

queue = TwoStackQueue()
for n in (1, 2, 3, 4):
    queue.push(n)
assert queue.pop() == 1
```

`PriorityQueue` puts the smallest element on top by default; pass `less` from
`classicds.rbtree` to put the largest there. `pop` returns the removed element
everywhere, and popping or peeking at an empty container raises `IndexError`.

## Expressions

`calculate` evaluates integer expressions with `+ - * /` and parentheses.
Division truncates toward zero, unbalanced parentheses raise `ValueError`,
division by zero raises `ZeroDivisionError`, and other characters are
ignored.

```python
from classicds.calculator import calculate

assert calculate("2*(3+4)-5") == 9
assert calculate("-7/2") == -3
```

## Commands

- `classicds-calc [EXPRESSION]` prints the value of the expression. Without
  an argument it reads the first whitespace-separated word of standard input,
  so write the expression without spaces there. Errors go to standard error
  with exit status 1.
- `classicds-digits [N]` prints how many of the numbers 1 to N are good:
  reading the decimal digits from the right, they alternate odd, even, odd,
  and so on. Without an argument N is read from standard input.