"""Python question banks."""

FUNCTION_FLOW_FUN = [
    {
        "id": "py-fff-001",
        "task": "What will be printed to the console?",
        "snippet": 'def greet(name):\n    return f"Hello, {name}!"\n\nmessage = greet("Alice")\nprint(message)',
        "options": ["Hello, Alice!", "greet Alice", "message", "Error"],
        "correct_answer": "Hello, Alice!",
        "explanation": "`greet` returns a formatted string, which is assigned to `message` and printed.",
    },
    {
        "id": "py-fff-002",
        "task": "What will be the final value of 'result'?",
        "snippet": "def add(a, b):\n    return a + b\n\ndef multiply(x, y):\n    return x * y\n\n"
                   "result = multiply(add(2, 3), 4)\nprint(result)",
        "options": ["20", "15", "12", "Error"],
        "correct_answer": "20",
        "explanation": "`add(2, 3)` returns 5, then `multiply(5, 4)` returns 20.",
    },
    {
        "id": "py-fff-003",
        "task": "What will be the output, line by line?",
        "snippet": 'def calculate(num):\n    if num > 5:\n        return "Large"\n    else:\n'
                   '        return "Small"\n\noutput1 = calculate(7)\noutput2 = calculate(3)\n'
                   'print(output1)\nprint(output2)',
        "options": ["Large\nSmall", "Small\nLarge", "Large", "Small"],
        "correct_answer": "Large\nSmall",
        "explanation": "7 > 5 takes the `if` branch ('Large'); 3 falls through to `else` ('Small').",
    },
    {
        "id": "py-fff-004",
        "task": "What will be printed to the console?",
        "snippet": "def outer_func(x):\n    def inner_func(y):\n        return x + y\n    return inner_func\n\n"
                   "closure = outer_func(10)\nresult = closure(5)\nprint(result)",
        "options": ["15", "10", "5", "Error"],
        "correct_answer": "15",
        "explanation": "`outer_func(10)` returns a closure remembering x=10, so `closure(5)` is 10 + 5.",
    },
    {
        "id": "py-fff-005",
        "task": "What will be printed to the console, line by line?",
        "snippet": "def power(base, exp=2):\n    return base ** exp\n\nprint(power(3))\nprint(power(2, 3))",
        "options": ["9\n8", "6\n5", "9\n6", "8\n9"],
        "correct_answer": "9\n8",
        "explanation": "`power(3)` uses the default exponent (3**2 = 9); `power(2, 3)` overrides it (2**3 = 8).",
    },
]

LIST_DICT_WRANGLER = [
    {
        "id": "py-ldw-001",
        "task": "Access the third element of 'my_list'. (Indices start at 0.)",
        "snippet": "my_list = [10, 20, 30, 40, 50]\nresult = my_list[",
        "correct_answer": "2]",
        "explanation": "Python list indices start at 0, so the third element (30) is at index 2.",
    },
    {
        "id": "py-ldw-002",
        "task": "Append the number 60 to the end of 'my_list'.",
        "snippet": "my_list = [10, 20, 30]\nmy_list.",
        "correct_answer": "append(60)",
        "explanation": "`append()` adds a single element to the end of a list.",
    },
    {
        "id": "py-ldw-003",
        "task": "Get the value stored under the key 'city' in the 'person' dictionary.",
        "snippet": "person = {'name': 'Alice', 'age': 30, 'city': 'New York'}\ncity_name = person['",
        "correct_answer": "city']",
        "explanation": "Dictionary values are looked up by putting the key in square brackets.",
    },
    {
        "id": "py-ldw-004",
        "task": "Compute the sum of every number in 'numbers'.",
        "snippet": "numbers = [5, 10, 15, 20]\ntotal = sum(",
        "correct_answer": "numbers)",
        "explanation": "The built-in `sum()` adds up every element of an iterable.",
    },
    {
        "id": "py-ldw-005",
        "task": "Build a list of only the even numbers in 'original_list' with a list comprehension.",
        "snippet": "original_list = [1, 2, 3, 4, 5, 6]\neven_numbers = [num for num in original_list if num % ",
        "correct_answer": "2 == 0]",
        "explanation": "A list comprehension applies an expression to each element and can filter "
                       "with a trailing `if` clause.",
    },
]

FILE_IO_FRONTIER = [
    {
        "id": "py-fio-001",
        "task": "Open 'data.txt' for reading and read its whole content.",
        "snippet": "file_name = 'data.txt'\nwith open(file_name, 'r') as f:\n    content = f.",
        "placeholder": "_____",
        "correct_answer": "read()",
        "explanation": "`read()` returns the whole file as a single string.",
        "expected_output": "Hello, Python files!\nLine 2.",
    },
    {
        "id": "py-fio-002",
        "task": "Append the line 'New line from Python!' to the end of 'log.txt'.",
        "snippet": "file_name = 'log.txt'\nline_to_write = 'New line from Python!\\n'\nwith open(file_name, ",
        "placeholder": "_____",
        "correct_answer": "'a') as f:\n    f.write(line_to_write)",
        "explanation": "Mode 'a' (append) adds to the end of the file. `f.write()` writes the string.",
        "expected_output": "Existing log content.\nNew line from Python!\n",
    },
    {
        "id": "py-fio-003",
        "task": "Read every line of 'lines.txt' into a list.",
        "snippet": "file_name = 'lines.txt'\nwith open(file_name, 'r') as f:\n    lines = f.",
        "placeholder": "_____",
        "correct_answer": "readlines()",
        "explanation": "`readlines()` returns a list of lines, each keeping its trailing newline (`\\n`).",
        "expected_output": "['First line.\\n', 'Second line.\\n', 'Third line.']",
    },
    {
        "id": "py-fio-004",
        "task": "Create 'output.txt' and write 'This is a new file.' to it, replacing any existing content.",
        "snippet": "file_name = 'output.txt'\ncontent_to_write = 'This is a new file.'\nwith open(file_name, ",
        "placeholder": "_____",
        "correct_answer": "'w') as f:\n    f.write(content_to_write)",
        "explanation": "Mode 'w' (write) creates the file if needed and truncates it if it exists.",
        "expected_output": "This is a new file.",
    },
    {
        "id": "py-fio-005",
        "task": "Loop over the lines of 'numbers.txt' and print each one without its newline.",
        "snippet": "file_name = 'numbers.txt'\nwith open(file_name, 'r') as f:\n    for line in f:\n"
                   "        print(line.",
        "placeholder": "_____",
        "correct_answer": "strip())",
        "explanation": "Iterating a file yields its lines. `strip()` removes surrounding whitespace, "
                       "newlines included.",
        "expected_output": "1\n2\n3",
    },
]
