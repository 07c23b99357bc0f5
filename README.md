# bankdesk

A keyboard-driven console application for a small bank desk, with three
short console exercises that share the same style of key-by-key, guarded
input. The screens and prompts of the desk are in Spanish. There are no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The bank desk

```
bankdesk [--data-dir DIR]
```

All data files are read and written in `--data-dir` (the current directory
by default). Menus are moved through with the up and down arrow keys and
confirmed with Enter. The main menu offers:

- **Crear cuenta**: reads a national ID number (ten digits whose last digit
  is a check digit). A new customer then gives a name, a surname, a birth
  date (the customer must be at least 18 and at most 100 years old, and the
  date may not be in the future) and a lower-case e-mail address such as
  `someone@example.com`, and opens a savings account, a checking account or
  both. A customer who is already registered may open the kind of account
  they do not have yet.
- **Login**: type a savings or checking account number (or `0` to leave) to
  reach deposits, withdrawals and editing of your own details.
- **Menu de ayuda**: opens `Utils/index.html`, relative to the current
  directory, in the web browser.
- **Mostrar usuarios**: lists every customer with their accounts, balances
  and movements.
- **Consultar movimientos**: searches the movements of all customers by date
  range, by name and ID number, or by minimum amount.
- **Restaurar backup**: overwrites `users.dat` with a backup file named in
  the data directory and reloads the customers.
- **Generar archivo descifrado para demostracion**: writes a deciphered copy
  (key 3) of an enciphered file in the data directory.
- **Salir**: takes a backup of `users.dat` named
  `users_backup_YYYYMMDD_HHMMSS.dat` in the data directory, saves and quits.

### Rules the desk enforces

- Savings accounts open with a balance between 10 and 50,000; checking
  accounts with between 250 and 50,000.
- Amounts accept at most two decimals. Deposits must be between 0.01 and
  50,000. Withdrawals must be at least 0.01 and cannot exceed the balance.
- Account numbers are the branch code `88`, a type digit (`1` for savings,
  `2` for checking), a running number and a final digit that makes the sum
  of all digits a multiple of ten. The running number starts at `1` and is
  stored zero-padded to six digits after each use.
- Movement IDs take the form `23230-<n>`, with a running counter.

### Files

Customers are kept in `users.dat`, a binary file enciphered with a byte-wise
Caesar shift (key 3). The counters for account numbers and movement IDs live
in `BankAccountIdConfig.dat` and `BankMovementsIdConfig.dat`.

### What the desk does not do

- The help page `Utils/index.html` is not shipped with the package; the menu
  entry only opens that path if it exists where the desk is run.
- Customers cannot be deleted from the menus; `UserManager.delete_user(dni)`
  does it from Python.
- Arrow-key navigation needs an interactive terminal. When standard input is
  not a terminal, keys are read as plain characters and arrows are not
  available, so only the first option of a menu can be chosen.

## Console exercises

```
bankdesk-desert [--group A B C] [--oasis X [X ...]]
```

Three travellers meet at the median of their positions (default `-5 3 10`);
the program prints the meeting point, the total distance walked, and the
nearest oasis (default positions `-6 0 9 15`), found by binary search over the
sorted positions.

```
bankdesk-names [NAME]
```

Takes a name, or reads one key by key (a capital first letter, then
lower-case letters). Its letters are lower-cased, sorted with quicksort and
printed with the original capital restored on its first occurrence.

```
bankdesk-powers [INDEX]
```

Takes a final index *n*, or reads it key by key, and prints
2⁰ + 2¹ + … + 2ⁿ.

## Using the pieces from Python

```python
from bankdesk.powers import sum_of_powers
from bankdesk.dates import is_leap_year, month_days
from bankdesk.input_validator import is_valid_dni
from bankdesk.backup import timestamped_backup_name

sum_of_powers(3)      # 15
is_leap_year(2000)    # True
month_days(2, 2023)   # 28
```

- `bankdesk.storage`: little-endian binary records (`write_int`,
  `write_string`, `save_records`, `load_records`, …).
- `bankdesk.cipher.CaesarCipher`: `encrypt_file`, `decrypt_file` and
  `decrypt_file_to`, shifting every byte modulo 256.
- `bankdesk.backup`: `make_backup`, `restore_backup`, `copy_file` and
  `timestamped_backup_name`.
- `bankdesk.user_manager.UserManager`: the customer store, with `deposit`,
  `withdraw` (raising `InsufficientFundsError` when the balance is too low),
  `login`, `query_movements`, `save_users` and `load_users`.
- `bankdesk.sorter.quick_sort(items, comparator)`: in-place quicksort by a
  three-way comparator.
- `bankdesk.console.CursorMenu`: the arrow-key menu, which accepts any
  iterable of keys for scripted input.