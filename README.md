# studentdesk

A small register of school students. Each student has a name, a roll number,
a class, a division and marks in physics, chemistry and maths. The total of
the three marks is stored with them and shown as a score out of 150. Records
are kept one per line in a plain text file. The file is `studentData.txt` in
the current directory unless you name another one.

## Install

    pip install .

## Command line

    studentdesk --help
    studentdesk [--data-file PATH] add --name NAME --roll N --class CLASS --div DIV \
        --physics P --chemistry C --maths M
    studentdesk [--data-file PATH] edit ROLL [--name NAME] [--class CLASS] [--div DIV] \
        [--physics P] [--chemistry C] [--maths M]
    studentdesk [--data-file PATH] show
    studentdesk about

- `add` checks the entered data and prints a summary. It then appends the
  record to the data file. The name must not be empty, and the roll number
  and all three marks must be non-zero. A mark that is left out counts as 0.
- `edit` finds the first record with the given roll number. It replaces only
  the fields you pass, works out the total again and rewrites the file.
- `show` prints a table of name, roll number, class and division for every
  record. If the data file does not exist, it prints only the header row.
- `about` prints the program name, a short description and the version.

The command exits with status 0 on success. On failure it exits with status 1
and writes a message to standard error. Failures are missing data, a roll
number that is not stored (`Student not found!`) and a data file that cannot
be read.

## Library

```python
from studentdesk.records import StudentStore, make_student, table_rows

store = StudentStore("studentData.txt")
store.append(make_student("Asha", 7, "FY", "A", 40, 35, 45))

student = store.find(7)
print("\n".join(student.summary_lines()))

store.update(7, "Asha", "SY", "B", 42, 38, 44)

for row in table_rows(store.load()):
    print(row)
```

- `make_student` raises `IncompleteDataError` (a `ValueError`) when required
  data is missing.
- `StudentStore.find` raises `IncompleteDataError` for roll number 0.
- `StudentStore.find` and `StudentStore.update` raise `StudentNotFoundError`
  (a `LookupError`) when no record has the roll number.
- `StudentStore.load` raises `OSError` if the file cannot be read.
- `StudentStore.save_all` overwrites the file with the records you give it.

The file format is eight whitespace-separated fields per record: name, roll,
class, division, the three marks and the total. `parse_records` reads this
format. It stops at the first malformed or incomplete record. `Student.to_line`
writes one record in the same format. Because fields are separated by
whitespace, a name, class or division must be a single word.

## What it does not do

studentdesk is a command-line tool and a library. It has no graphical
interface with windows or dialogs. It stores records only in the plain text
file described above. It has no database and no way to delete a record.

## Tests

    pip install .[test]
    pytest