r"""
A catalogue of classic software-testing techniques.

Each technique is a small pure function paired with a table-driven self-check:

| #  | Technique                     | Function                           |
| -- | ----------------------------- | ---------------------------------- |
| 1  | Set theory                    | `active_features`                  |
| 2  | Equivalence partitioning      | `process_value`                    |
| 3  | Coverage / path testing       | `trace_branches`                   |
| 4  | Boundary-value analysis       | `check_range`                      |
| 5  | Combinatorial testing         | `evaluate_combination`             |
| 6  | Sorting (monotonicity)        | `is_sorted`                        |
| 7  | Venn diagram classification   | `classify_number`                  |
| 8  | Factorial                     | `factorial`                        |
| 9  | Fibonacci                     | `fibonacci`                        |
| 10 | Primality                     | `is_prime`                         |

The functions live in `testlab.techniques`; the self-checks and the ordered runner in
`testlab.selfcheck`; the console program in `testlab.cli`.
"""
