# ninetools

This package has three small command-line tools. You can also use each one as a Python module:

- `btc` is a bitcoin value calculator (`ninetools.exchange`).
- `RPN` evaluates reverse Polish notation (`ninetools.rpn`).
- `PmergeMe` times a merge sort (`ninetools.pmerge`).

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## btc: bitcoin value calculator

    btc input.txt

### Files

The tool reads exchange rates from `data.csv` in the current directory.

- Each line of `data.csv` has the form `date,rate`.
- The first line is a header and is skipped.
- `data.csv` is not included in the package. You must supply it yourself.

The tool then reads the input file named on the command line.

- Each line of the input file has the form `date | value`.
- Again, the first line is a header and is skipped.

### Output

Each valid line prints `date => value = result` on standard output. The result uses the rate for the latest date on or before the given date. If the given date is earlier than every known rate, the tool uses the earliest rate.

A bad line prints `Error: ...` on standard error, and processing moves on to the next line. The tool checks each line in this order:

1. The line is malformed. The message is `invalid input format => <line>`.
2. The value is negative.
3. The value is above 1000.
4. The delimiter is not `|`.
5. The date is not in `YYYY-MM-DD` form.
6. The date is before 2010-08-14.
7. The date does not exist, with leap years taken into account.

### Errors and exit status

- A line of `data.csv` that cannot be read prints `Error: invalid exchange rate format`.
- A missing `data.csv` prints `Error: could not open data.csv`.
- If no rates are loaded and there is a valid line to value, the tool exits with status 1.
- An input file that cannot be opened prints `Error: could not open input file`.
- The wrong number of arguments exits with status 1.

### Python API

```python
from ninetools.exchange import BitcoinExchange, InputError, is_valid_date

exchange = BitcoinExchange({"2011-01-03": 0.3, "2012-01-11": 7.1})
exchange.calculate_exchange_rate("2011-06-01", 10)    # value at the 2011-01-03 rate
list(exchange.process_lines(["2011-06-01 | 10", "2011-06-01 | -1"]))
# ["2011-06-01 => 10 = 3", InputError("not a positive number.")]
is_valid_date("2012-02-29")                            # True
```

`BitcoinExchange(rates=None)` takes an optional mapping from date to rate. Its methods are:

- `load_exchange_rates(filename)` loads a CSV file with a header line.
  - It returns the lines it could not read.
  - It raises `OSError` if the file cannot be opened.
- `load_rate_lines(lines)` does the same for lines that are already in memory. These lines have no header.
- `parse_line(line)` returns `(date, value)`, or raises `InputError`.
- `calculate_exchange_rate(date, value)` returns the value times the applicable rate. It raises `LookupError` when no rates are loaded.
- `process_lines(lines)` yields either a result string or an `InputError` for each line.
- `parse_input(filename)` does the same for a file with a header line, and returns a list.
- `rates` is a copy of the loaded rates, ordered by date.

Values and rates are held in single precision. Results are printed in `%g` style.

## RPN: reverse Polish notation evaluator

    RPN "8 9 * 9 - 9 - 9 - 4 - 1 +"

The expression follows these rules:

- Operands are single digits, `0` to `9`.
- The operators are `+ - * /`.
- Spaces are the only other characters allowed.

Division truncates toward zero. Results wrap around like signed 32-bit integers.

The tool prints the result. These problems print `Error: ...` and exit with status 1:

- an operator with fewer than two operands (`Not enough operands.`)
- any other character (`Invalid character in expression.`)
- division by zero (`Division by zero.`)
- anything other than exactly one value left at the end (`Invalid expression.`)
- the wrong number of arguments (`Error: Invalid number of arguments.`)

In Python:

- `evaluate(expression)` returns the integer result.
- `apply_operation(a, b, op)` applies a single operator.
- Both raise `RPNError` on failure.

## PmergeMe: merge sort timer

    PmergeMe 3 5 9 7 4

The tool sorts the numbers twice, once as a list and once as a deque. It then prints:

- the numbers before sorting
- the numbers after sorting
- the CPU time each sort took, in microseconds

Each argument is read the way C's `atoi` reads a number. Leading whitespace and a sign are accepted, and text with no leading digits counts as 0.

These cases print `Error: ...` and exit with status 1:

- a negative number
- no arguments at all

In Python:

- `parse_numbers(args)` converts the arguments. It raises `ValueError` on a negative number.
- `merge_sort(values)` returns a new sorted list. The sort is stable.
- `sort_and_time(numbers)` returns a `SortReport`, which has these fields:
  - `before`
  - `after`
  - `vector_time`
  - `deque_time`
- `SortReport.format()` gives the text that the command prints.