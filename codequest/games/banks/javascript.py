"""JavaScript question banks."""

MODERN_JS_MAKEOVER = [
    {
        "id": "js-mjm-001",
        "task": "Refactor this variable declaration to use modern JavaScript practices.",
        "snippet": 'var myVariable = "Hello";\nmyVariable = "World";',
        "options": [
            'let myVariable = "Hello";\nmyVariable = "World";',
            'const myVariable = "Hello";\nmyVariable = "World";',
            'let myVariable = "Hello";\nconst myVariable = "World";',
            'var myVariable = "Hello"; // No change',
        ],
        "correct_answer": 'let myVariable = "Hello";\nmyVariable = "World";',
        "explanation": "Use `let` instead of `var` for block-scoped variables that might be reassigned. "
                       "`const` would cause an error here because `myVariable` is reassigned.",
    },
    {
        "id": "js-mjm-002",
        "task": "Convert this function to an arrow function.",
        "snippet": "function add(a, b) {\n  return a + b;\n}",
        "options": [
            "const add = (a, b) => {\n  return a + b;\n};",
            "function add = (a, b) => a + b;",
            "let add(a, b) => a + b;",
            "var add = function(a, b) { return a + b; };",
        ],
        "correct_answer": "const add = (a, b) => {\n  return a + b;\n};",
        "explanation": "Arrow functions provide a more concise syntax for functions. "
                       "Using `const` is preferred for function declarations.",
    },
    {
        "id": "js-mjm-003",
        "task": "Refactor string concatenation using template literals.",
        "snippet": 'var name = "Alice";\nvar age = 30;\n'
                   'var message = "Hello, my name is " + name + " and I am " + age + " years old.";',
        "options": [
            "`Hello, my name is ${name} and I am ${age} years old.`",
            '"Hello, my name is {name} and I am {age} years old."',
            "'Hello, my name is ' + `${name}` + ' and I am ' + `${age}` + ' years old.';",
            '"Hello, my name is " + name.toString() + " and I am " + age.toString() + " years old.";',
        ],
        "correct_answer": "`Hello, my name is ${name} and I am ${age} years old.`",
        "explanation": "Template literals (backticks) allow for easy embedding of expressions (${expression}) "
                       "within strings, making concatenation cleaner and more readable.",
    },
    {
        "id": "js-mjm-004",
        "task": "Use array destructuring to extract 'firstName' and 'lastName' from the 'names' array.",
        "snippet": 'var names = ["John", "Doe", "Developer"];\nvar firstName = names[0];\nvar lastName = names[1];',
        "options": [
            "const [firstName, lastName] = names;",
            "const firstName, lastName = names;",
            "var [firstName, lastName] = names;",
            "const {firstName, lastName} = names;",
        ],
        "correct_answer": "const [firstName, lastName] = names;",
        "explanation": "Array destructuring allows you to unpack values from arrays into distinct variables "
                       "using a syntax that mirrors array literals.",
    },
    {
        "id": "js-mjm-005",
        "task": "Use the spread operator to combine two arrays.",
        "snippet": "var arr1 = [1, 2];\nvar arr2 = [3, 4];\nvar combinedArr = arr1.concat(arr2);",
        "options": [
            "const arr1 = [1, 2];\nconst arr2 = [3, 4];\nconst combinedArr = [...arr1, ...arr2];",
            "const arr1 = [1, 2];\nconst arr2 = [3, 4];\nconst combinedArr = [arr1, arr2];",
            "const arr1 = [1, 2];\nconst arr2 = [3, 4];\nconst combinedArr = arr1 + arr2;",
            "const arr1 = [1, 2];\nconst arr2 = [3, 4];\nconst combinedArr = arr1.push(arr2);",
        ],
        "correct_answer": "const arr1 = [1, 2];\nconst arr2 = [3, 4];\nconst combinedArr = [...arr1, ...arr2];",
        "explanation": "The spread operator (`...`) expands an iterable in places where zero or more elements "
                       "are expected. It's concise for combining arrays.",
    },
]

CALLBACK_CONUNDRUM = [
    {
        "id": "js-cc-001",
        "task": "What will be printed to the console?",
        "snippet": 'console.log("Start");\n\nsetTimeout(() => {\n  console.log("Timeout 1");\n}, 0);\n\n'
                   'console.log("End");',
        "options": [
            "Start\nEnd\nTimeout 1",
            "Start\nTimeout 1\nEnd",
            "Timeout 1\nStart\nEnd",
            "Error",
        ],
        "correct_answer": "Start\nEnd\nTimeout 1",
        "explanation": "Even with a delay of 0, `setTimeout` schedules its callback for a later tick of the "
                       "Event Loop, after the current synchronous code has finished.",
    },
    {
        "id": "js-cc-002",
        "task": "What will be printed to the console?",
        "snippet": 'console.log("A");\n\nsetTimeout(() => console.log("B"), 10);\n'
                   'setTimeout(() => console.log("C"), 0);\n\nconsole.log("D");',
        "options": ["A\nD\nC\nB", "A\nC\nB\nD", "A\nB\nC\nD", "A\nD\nB\nC"],
        "correct_answer": "A\nD\nC\nB",
        "explanation": "Synchronous code ('A', 'D') runs first. Timeout callbacks then run from the task "
                       "queue; 'C' (0ms) is due before 'B' (10ms).",
    },
    {
        "id": "js-cc-003",
        "task": "What will be printed to the console?",
        "snippet": 'function asyncOperation(callback) {\n  setTimeout(() => {\n    callback("Data received!");\n'
                   '  }, 50);\n}\n\nconsole.log("Requesting data...");\nasyncOperation((data) => {\n'
                   '  console.log(data);\n});\nconsole.log("Request sent.");',
        "options": [
            "Requesting data...\nRequest sent.\nData received!",
            "Requesting data...\nData received!\nRequest sent.",
            "Data received!\nRequesting data...\nRequest sent.",
            "Error",
        ],
        "correct_answer": "Requesting data...\nRequest sent.\nData received!",
        "explanation": "Both log calls around `asyncOperation` are synchronous. The callback only runs "
                       "after the 50ms timer fires.",
    },
    {
        "id": "js-cc-004",
        "task": "What will be printed to the console?",
        "snippet": "let count = 0;\n\nfunction increment() {\n  setTimeout(() => {\n    count++;\n"
                   "    console.log('Count:', count);\n  }, 0);\n}\n\nincrement();\ncount++;\n"
                   "console.log('Main:', count);",
        "options": ["Main: 1\nCount: 2", "Count: 1\nMain: 2", "Main: 2\nCount: 1", "Main: 0\nCount: 1"],
        "correct_answer": "Main: 1\nCount: 2",
        "explanation": "The synchronous `count++` and 'Main: 1' run first. The timeout callback then "
                       "increments `count` to 2 and prints 'Count: 2'.",
    },
    {
        "id": "js-cc-005",
        "task": "What will be printed to the console?",
        "snippet": 'console.log("Start");\n\nnew Promise(resolve => {\n  console.log("Promise executing");\n'
                   '  resolve("Promise resolved");\n}).then(val => {\n  console.log(val);\n});\n\n'
                   'setTimeout(() => {\n  console.log("Timeout");\n}, 0);\n\nconsole.log("End");',
        "options": [
            "Start\nPromise executing\nEnd\nPromise resolved\nTimeout",
            "Start\nEnd\nPromise executing\nPromise resolved\nTimeout",
            "Start\nPromise executing\nPromise resolved\nEnd\nTimeout",
            "Start\nEnd\nTimeout\nPromise executing\nPromise resolved",
        ],
        "correct_answer": "Start\nPromise executing\nEnd\nPromise resolved\nTimeout",
        "explanation": "The Promise executor runs immediately. `then` callbacks are microtasks and run "
                       "before macrotasks such as `setTimeout` callbacks.",
    },
]

_PREDICT = "What will this code print?"

GUESS_THE_OUTPUT = [
    {
        "id": "gto-1",
        "task": _PREDICT,
        "snippet": "let x = 5;\nlet y = x++ + 2;\nconsole.log(y);",
        "options": ["7", "8", "6", "5"],
        "correct_answer": "7",
        "explanation": "`x++` (post-increment) uses x's original value (5) in the expression first, so `y = 7`. "
                       "Only then is `x` incremented to 6.",
        "difficulty": "easy",
    },
    {
        "id": "gto-2",
        "task": _PREDICT,
        "snippet": "let arr = [1, 2, 3];\narr.push(4);\nconsole.log(arr.length);",
        "options": ["3", "4", "undefined", "Error"],
        "correct_answer": "4",
        "explanation": "`push()` adds an element to the end of an array, increasing its length.",
        "difficulty": "easy",
    },
    {
        "id": "gto-3",
        "task": _PREDICT,
        "snippet": "for (let i = 0; i < 3; i++) {\n  setTimeout(() => console.log(i), 0);\n}",
        "options": ["0 1 2", "3 3 3", "Error", "undefined"],
        "correct_answer": "0 1 2",
        "explanation": "With `let` each iteration gets a new block-scoped `i`, so every callback closes over "
                       "its own value and logs 0, 1 and 2.",
        "difficulty": "medium",
    },
    {
        "id": "gto-4",
        "task": _PREDICT,
        "snippet": "let a = [1, 2];\nlet b = a;\na.push(3);\nconsole.log(b);",
        "options": ["[1, 2]", "[1, 2, 3]", "[1, 3]", "Error"],
        "correct_answer": "[1, 2, 3]",
        "explanation": "`let b = a;` copies a reference to the same array, so modifying `a` also shows through `b`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-5",
        "task": _PREDICT,
        "snippet": "function f(a, b) {\n  a = 10;\n  b.push(5);\n}\nlet x = 1;\nlet y = [2];\nf(x, y);\n"
                   "console.log(x, y);",
        "options": ["1 [2, 5]", "10 [2, 5]", "1 [2]", "10 [2]"],
        "correct_answer": "1 [2, 5]",
        "explanation": "Numbers are passed by value, so `a = 10` leaves `x` alone. Arrays are passed by "
                       "reference, so `b.push(5)` changes `y`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-6",
        "task": _PREDICT,
        "snippet": "console.log(typeof null);",
        "options": ["'object'", "'null'", "'undefined'", "'boolean'"],
        "correct_answer": "'object'",
        "explanation": "`typeof null` is `'object'`, a long-standing quirk of the language.",
        "difficulty": "medium",
    },
    {
        "id": "gto-7",
        "task": _PREDICT,
        "snippet": "console.log(0.1 + 0.2 === 0.3);",
        "options": ["true", "false", "Error", "NaN"],
        "correct_answer": "false",
        "explanation": "Floating-point rounding makes `0.1 + 0.2` equal `0.30000000000000004`, "
                       "which is not strictly equal to `0.3`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-8",
        "task": _PREDICT,
        "snippet": "const obj = { a: 1 };\nconst obj2 = { ...obj };\nobj.a = 2;\nconsole.log(obj2.a);",
        "options": ["1", "2", "undefined", "Error"],
        "correct_answer": "1",
        "explanation": "The spread operator makes a shallow copy. Later changes to `obj.a` do not reach `obj2.a`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-9",
        "task": _PREDICT,
        "snippet": "let count = 0;\nfunction increment() {\n  return ++count;\n}\nconsole.log(increment());\n"
                   "console.log(increment());",
        "options": ["1 1", "0 1", "1 2", "2 1"],
        "correct_answer": "1 2",
        "explanation": "`++count` increments first and returns the new value; `count` persists between calls.",
        "difficulty": "easy",
    },
    {
        "id": "gto-10",
        "task": _PREDICT,
        "snippet": "console.log(NaN === NaN);",
        "options": ["true", "false", "Error", "undefined"],
        "correct_answer": "false",
        "explanation": "`NaN` is the only value not equal to itself. Use `isNaN()` to test for it.",
        "difficulty": "medium",
    },
    {
        "id": "gto-11",
        "task": _PREDICT,
        "snippet": "console.log(parseInt('10.99', 10));",
        "options": ["10", "10.99", "NaN", "Error"],
        "correct_answer": "10",
        "explanation": "`parseInt()` returns an integer and stops at the first non-numeric character.",
        "difficulty": "easy",
    },
    {
        "id": "gto-12",
        "task": _PREDICT,
        "snippet": "console.log('5' - 3);",
        "options": ["2", "53", "NaN", "Error"],
        "correct_answer": "2",
        "explanation": "Subtraction converts the string '5' to a number before operating.",
        "difficulty": "easy",
    },
    {
        "id": "gto-13",
        "task": _PREDICT,
        "snippet": "console.log([] + []);",
        "options": ["''", "[]", "0", "NaN"],
        "correct_answer": "''",
        "explanation": "`+` converts both arrays to strings. `[].toString()` is `''`, so the result is `''`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-14",
        "task": _PREDICT,
        "snippet": "console.log({} + []);",
        "options": ["'[object Object]'", "'[object Array]'", "0", "NaN"],
        "correct_answer": "'[object Object]'",
        "explanation": "As an expression, `{}` becomes `'[object Object]'` and `[]` becomes `''`. At the start "
                       "of a console line `{}` may parse as a block instead; assume an expression here.",
        "difficulty": "hard",
    },
    {
        "id": "gto-15",
        "task": _PREDICT,
        "snippet": "console.log(typeof function(){});",
        "options": ["'function'", "'object'", "'undefined'", "'boolean'"],
        "correct_answer": "'function'",
        "explanation": "`typeof` identifies functions as `'function'`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-16",
        "task": _PREDICT,
        "snippet": "console.log(true + false);",
        "options": ["1", "0", "truefalse", "NaN"],
        "correct_answer": "1",
        "explanation": "In arithmetic `true` coerces to 1 and `false` to 0, so `1 + 0` is `1`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-17",
        "task": _PREDICT,
        "snippet": "let val = 10;\nif (val === '10') {\n  console.log('Equal');\n} else {\n"
                   "  console.log('Not Equal');\n}",
        "options": ["Equal", "Not Equal", "Error", "undefined"],
        "correct_answer": "Not Equal",
        "explanation": "`===` compares type as well as value. The number 10 is not the string '10'.",
        "difficulty": "easy",
    },
    {
        "id": "gto-18",
        "task": _PREDICT,
        "snippet": "let arr = [1, 2, 3];\ndelete arr[1];\nconsole.log(arr.length);",
        "options": ["2", "3", "undefined", "Error"],
        "correct_answer": "3",
        "explanation": "`delete` leaves an empty slot. It does not reindex the array or change its length.",
        "difficulty": "medium",
    },
    {
        "id": "gto-19",
        "task": _PREDICT,
        "snippet": "console.log(Math.max());",
        "options": ["-Infinity", "Infinity", "0", "NaN"],
        "correct_answer": "-Infinity",
        "explanation": "With no arguments, `Math.max()` returns `-Infinity`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-20",
        "task": _PREDICT,
        "snippet": "console.log('hello'.charAt(0));",
        "options": ["'h'", "'e'", "''", "Error"],
        "correct_answer": "'h'",
        "explanation": "`charAt()` returns the character at the given index, counting from 0.",
        "difficulty": "easy",
    },
    {
        "id": "gto-21",
        "task": _PREDICT,
        "snippet": "let nums = [1, 2, 3];\nnums[5] = 6;\nconsole.log(nums.length);",
        "options": ["3", "4", "5", "6"],
        "correct_answer": "6",
        "explanation": "Assigning past the end grows the array to fit, leaving empty slots in between.",
        "difficulty": "medium",
    },
    {
        "id": "gto-22",
        "task": _PREDICT,
        "snippet": "console.log(parseInt('xyz123'));",
        "options": ["NaN", "123", "0", "Error"],
        "correct_answer": "NaN",
        "explanation": "`parseInt()` parses from the start; if the first character is not numeric it returns `NaN`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-23",
        "task": _PREDICT,
        "snippet": "console.log(+'10');",
        "options": ["10", "'10'", "NaN", "Error"],
        "correct_answer": "10",
        "explanation": "Unary plus converts its operand to a number.",
        "difficulty": "medium",
    },
    {
        "id": "gto-24",
        "task": _PREDICT,
        "snippet": "let p = new Promise(resolve => setTimeout(() => resolve(1), 10));\n"
                   "p.then(val => console.log(val));\nconsole.log(0);",
        "options": ["0 1", "1 0", "0", "1"],
        "correct_answer": "0 1",
        "explanation": "`console.log(0)` runs immediately. The `then` callback only runs once the timer "
                       "has resolved the promise.",
        "difficulty": "hard",
    },
    {
        "id": "gto-25",
        "task": _PREDICT,
        "snippet": "let arr = [1, 2, 3];\nconsole.log(arr.slice(1, 2));",
        "options": ["[2]", "[1, 2]", "[2, 3]", "[1]"],
        "correct_answer": "[2]",
        "explanation": "`slice()` returns a new array; its end index is exclusive.",
        "difficulty": "easy",
    },
    {
        "id": "gto-26",
        "task": _PREDICT,
        "snippet": "console.log(typeof [1,2]);",
        "options": ["'object'", "'array'", "'function'", "'undefined'"],
        "correct_answer": "'object'",
        "explanation": "Arrays are objects, so `typeof` returns `'object'`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-27",
        "task": _PREDICT,
        "snippet": "let a = 1;\nlet b = 2;\n[a, b] = [b, a];\nconsole.log(a, b);",
        "options": ["1 2", "2 1", "undefined undefined", "Error"],
        "correct_answer": "2 1",
        "explanation": "Destructuring assignment swaps the two values.",
        "difficulty": "medium",
    },
    {
        "id": "gto-28",
        "task": _PREDICT,
        "snippet": "const x = 'Hello';\nsetTimeout(() => console.log(x), 1000);\nconst x = 'World';\n"
                   "console.log(x);",
        "options": ["Hello World", "World Hello", "World", "Error"],
        "correct_answer": "Error",
        "explanation": "Redeclaring the `const` `x` is a `SyntaxError: Identifier 'x' has already been declared`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-29",
        "task": _PREDICT,
        "snippet": "console.log(Boolean(0));\nconsole.log(Boolean(''));\nconsole.log(Boolean(null));\n"
                   "console.log(Boolean(undefined));",
        "options": ["false false false false", "true true true true",
                    "false true false true", "true false true false"],
        "correct_answer": "false false false false",
        "explanation": "0, the empty string, null and undefined are all falsy.",
        "difficulty": "easy",
    },
    {
        "id": "gto-30",
        "task": _PREDICT,
        "snippet": "let obj = { a: 1 };\nlet clone = JSON.parse(JSON.stringify(obj));\nobj.a = 2;\n"
                   "console.log(clone.a);",
        "options": ["1", "2", "undefined", "Error"],
        "correct_answer": "1",
        "explanation": "A JSON round trip deep-copies simple objects, so the clone keeps its own `a`.",
        "difficulty": "medium",
    },
    {
        "id": "gto-31",
        "task": _PREDICT,
        "snippet": "console.log(+'abc');",
        "options": ["NaN", "0", "Error", "undefined"],
        "correct_answer": "NaN",
        "explanation": "Unary plus on a string that is not a valid number gives `NaN`.",
        "difficulty": "easy",
    },
    {
        "id": "gto-32",
        "task": _PREDICT,
        "snippet": "let num = 10;\nnum = num ?? 5;\nconsole.log(num);",
        "options": ["10", "5", "undefined", "Error"],
        "correct_answer": "10",
        "explanation": "`??` only falls back when the left side is `null` or `undefined`; 10 is kept.",
        "difficulty": "medium",
    },
    {
        "id": "gto-33",
        "task": _PREDICT,
        "snippet": "console.log(5 < 6 < 7);",
        "options": ["true", "false", "Error", "NaN"],
        "correct_answer": "true",
        "explanation": "Left to right: `5 < 6` is `true`, then `true < 7` compares `1 < 7`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-34",
        "task": _PREDICT,
        "snippet": "console.log(7 < 6 < 5);",
        "options": ["true", "false", "Error", "NaN"],
        "correct_answer": "true",
        "explanation": "`7 < 6` is `false`, then `false < 5` compares `0 < 5`, which is `true`.",
        "difficulty": "hard",
    },
    {
        "id": "gto-35",
        "task": _PREDICT,
        "snippet": "let val = 1;\nswitch (val) {\n  case 1:\n    console.log('One');\n  case 2:\n"
                   "    console.log('Two');\n    break;\n  default:\n    console.log('Other');\n}",
        "options": ["One", "One Two", "Two", "Other"],
        "correct_answer": "One Two",
        "explanation": "Without a `break` after `case 1` execution falls through into `case 2`.",
        "difficulty": "medium",
    },
    {
        "id": "gto-36",
        "task": _PREDICT,
        "snippet": "console.log(Array.isArray([]));",
        "options": ["true", "false", "undefined", "Error"],
        "correct_answer": "true",
        "explanation": "`Array.isArray()` is the reliable way to check for an array.",
        "difficulty": "easy",
    },
    {
        "id": "gto-37",
        "task": _PREDICT,
        "snippet": "function func() { return arguments.length; }\nconsole.log(func(1, 2, 3));",
        "options": ["3", "undefined", "Error", "1"],
        "correct_answer": "3",
        "explanation": "`arguments` holds every argument passed, so its length is 3.",
        "difficulty": "medium",
    },
    {
        "id": "gto-38",
        "task": _PREDICT,
        "snippet": "const arr = [1, 2, 3];\narr[10] = 100;\nconsole.log(arr.indexOf(undefined));",
        "options": ["-1", "1", "4", "Error"],
        "correct_answer": "-1",
        "explanation": "`indexOf()` skips the empty slots created by growing the array, so `undefined` "
                       "is never found.",
        "difficulty": "hard",
    },
    {
        "id": "gto-39",
        "task": _PREDICT,
        "snippet": "console.log('abc'[0]);",
        "options": ["'a'", "undefined", "Error", "null"],
        "correct_answer": "'a'",
        "explanation": "Strings support bracket indexing for single characters.",
        "difficulty": "easy",
    },
    {
        "id": "gto-40",
        "task": _PREDICT,
        "snippet": "let x = 1;\nlet y = x;\ny = 2;\nconsole.log(x);",
        "options": ["1", "2", "undefined", "Error"],
        "correct_answer": "1",
        "explanation": "Assigning a primitive copies it; changing `y` leaves `x` alone.",
        "difficulty": "easy",
    },
]

_BLANK = "Fill in the blank."

FILL_IN_THE_BLANKS = [
    {
        "id": "fitb-1", "task": _BLANK,
        "snippet": "function greet(name) {\n  console.log('Hello, ' + ",
        "code_after": " + '!');\n}",
        "correct_answer": "name",
        "hint": "What variable holds the person's name?",
        "explanation": "The parameter `name` is used to build the greeting.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-2", "task": _BLANK,
        "snippet": "const numbers = [1, 2, 3];\nfor (let i = 0; i < numbers.length; i++) {\n"
                   "  if (numbers[i] % 2 === 0) {\n    console.",
        "code_after": "(numbers[i]);\n  }\n}",
        "correct_answer": "log",
        "hint": "How do you print something to the console?",
        "explanation": "`console.log()` prints output to the console.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-3", "task": _BLANK,
        "snippet": "function sum(a, b) {\n  return a ",
        "code_after": " b;\n}",
        "correct_answer": "+",
        "hint": "What operator do you use for addition?",
        "explanation": "The `+` operator adds two numbers.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-4", "task": _BLANK,
        "snippet": "const array = [1, 2, 3];\narray.",
        "code_after": "();\nconsole.log(array); // Expected: [1, 2]",
        "correct_answer": "pop",
        "hint": "Which array method removes the last element?",
        "explanation": "`pop()` removes the last element of an array and returns it.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-5", "task": _BLANK,
        "snippet": "const message = 'Hello';\nconsole.log(message.",
        "code_after": "()); // Expected: 'HELLO'",
        "correct_answer": "toUpperCase",
        "hint": "How do you convert a string to uppercase?",
        "explanation": "`toUpperCase()` converts a string to uppercase letters.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-6", "task": _BLANK,
        "snippet": "let num = 10;\nif (num > 5 ",
        "code_after": " num < 15) {\n  console.log('Within range');\n}",
        "correct_answer": "&&",
        "hint": "What logical operator means 'and'?",
        "explanation": "`&&` (logical AND) is true only when both operands are true.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-7", "task": _BLANK,
        "snippet": "class Car {\n  constructor(brand) {\n    this.",
        "code_after": " = brand;\n  }\n}",
        "correct_answer": "brand",
        "hint": "How do you store properties in a class constructor?",
        "explanation": "`this.propertyName = value;` assigns a property on the new instance.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-8", "task": _BLANK,
        "snippet": "const data = [1, 2, 3, 4, 5];\nconst even = data.",
        "code_after": "(n => n % 2 === 0);\nconsole.log(even); // Expected: [2, 4]",
        "correct_answer": "filter",
        "hint": "Which array method creates a new array with elements that pass a test?",
        "explanation": "`filter()` returns a new array holding the elements that pass the test.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-9", "task": _BLANK,
        "snippet": "let counter = 0;\nconst intervalId = setInterval(() => {\n  counter++;\n"
                   "  if (counter === 3) {\n    clearInterval(",
        "code_after": ");\n  }\n}, 1000);",
        "correct_answer": "intervalId",
        "hint": "What is returned by `setInterval` that you use to stop it?",
        "explanation": "`setInterval` returns an id that `clearInterval` uses to stop it.",
        "difficulty": "hard",
    },
    {
        "id": "fitb-10", "task": _BLANK,
        "snippet": "Promise.resolve(1)\n  .then(val => val + 1)\n  .",
        "code_after": "(err => console.error(err))\n  .then(finalVal => console.log(finalVal));",
        "correct_answer": "catch",
        "hint": "What keyword handles errors in Promises?",
        "explanation": "`catch()` handles errors in a Promise chain.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-11", "task": _BLANK,
        "snippet": "const myMap = new Map();\nmyMap.set('a', 1);\nconsole.log(myMap.",
        "code_after": "('a'));",
        "correct_answer": "get",
        "hint": "How do you retrieve a value from a Map using its key?",
        "explanation": "`get()` returns the value stored under a key in a Map.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-12", "task": _BLANK,
        "snippet": "const set = new Set();\nset.add(1);\nset.add(2);\nset.add(1);\nconsole.log(set.",
        "code_after": ");",
        "correct_answer": "size",
        "hint": "What property tells you the number of elements in a Set?",
        "explanation": "`size` is the number of elements in a Set. Duplicates are ignored.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-13", "task": _BLANK,
        "snippet": "let result = 10 ",
        "code_after": " 2;\nconsole.log(result);",
        "correct_answer": "**",
        "hint": "What operator is used for exponentiation?",
        "explanation": "`**` raises to a power: `10 ** 2` is 100.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-14", "task": _BLANK,
        "snippet": "const person = { name: 'Alice' };\nconsole.log(person?.",
        "code_after": ");",
        "correct_answer": "age",
        "hint": "How do you safely access a potentially undefined property?",
        "explanation": "Optional chaining (`?.`) reads a property without checking every link in the chain.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-15", "task": _BLANK,
        "snippet": "const numbers = [1, 2, 3];\nconst sum = numbers.",
        "code_after": "((acc, curr) => acc + curr, 0);\nconsole.log(sum);",
        "correct_answer": "reduce",
        "hint": "Which array method folds every element into a single value?",
        "explanation": "`reduce()` runs a reducer over the array and returns a single value.",
        "difficulty": "hard",
    },
    {
        "id": "fitb-16", "task": _BLANK,
        "snippet": "const value = '123';\nconst num = Number(value);\nconsole.log(typeof ",
        "code_after": ");",
        "correct_answer": "num",
        "hint": "What variable holds the converted number?",
        "explanation": "`Number()` converts a string to a number.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-17", "task": _BLANK,
        "snippet": "let x = 5;\nlet y = `The value is ${",
        "code_after": "}`;\nconsole.log(y);",
        "correct_answer": "x",
        "hint": "How do you embed a variable in a template literal?",
        "explanation": "Template literals embed expressions with `${...}`.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-18", "task": _BLANK,
        "snippet": "function outer() {\n  let a = 10;\n  function inner() {\n    return a;\n  }\n"
                   "  return inner;\n}\nconst getA = outer();\nconsole.log(",
        "code_after": "());",
        "correct_answer": "getA",
        "hint": "Which function call will access the variable 'a'?",
        "explanation": "`inner` closes over `a`, so calling the returned function still reads it after "
                       "`outer` has finished.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-19", "task": _BLANK,
        "snippet": "const data = [10, 20, 30];\nconst mapped = data.map(item => item ",
        "code_after": " 2);\nconsole.log(mapped);",
        "correct_answer": "*",
        "hint": "What mathematical operator would double each item?",
        "explanation": "`map()` builds a new array from the callback's result for every element.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-20", "task": _BLANK,
        "snippet": "console.log(typeof undefined === 'undefined' ",
        "code_after": " typeof null === 'object');",
        "correct_answer": "&&",
        "hint": "What logical operator connects two conditions, both of which must be true?",
        "explanation": "Both checks hold: `typeof undefined` is `'undefined'` and `typeof null` is `'object'`.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-21", "task": _BLANK,
        "snippet": "const numbers = [1, 5, 2, 8];\nnumbers.sort((a, b) => a ",
        "code_after": " b);\nconsole.log(numbers);",
        "correct_answer": "-",
        "hint": "For ascending sort, what mathematical operation helps compare two numbers?",
        "explanation": "`a - b` is negative when `a` sorts first, positive when after, 0 when equal.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-22", "task": _BLANK,
        "snippet": "try {\n  throw 'An error occurred!';\n} ",
        "code_after": "(e) {\n  console.log(e);\n}",
        "correct_answer": "catch",
        "hint": "What block handles errors thrown in a `try` block?",
        "explanation": "The `catch` block handles exceptions thrown inside `try`.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-23", "task": _BLANK,
        "snippet": "let arr1 = [1, 2];\nlet arr2 = [3, 4];\nlet combined = [...arr1, ...",
        "code_after": "];\nconsole.log(combined);",
        "correct_answer": "arr2",
        "hint": "What's the name of the second array you want to spread?",
        "explanation": "Spread syntax expands each array into the new array literal.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-24", "task": _BLANK,
        "snippet": "const myString = 'JavaScript';\nconsole.log(myString.",
        "code_after": ");",
        "correct_answer": "length",
        "hint": "What property gives you the number of characters in a string?",
        "explanation": "`length` is the number of characters in a string.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-25", "task": _BLANK,
        "snippet": "for (let i = 0; i < 5; i++) {\n  if (i === 3) {\n    ",
        "code_after": ";\n  }\n  console.log(i);\n}",
        "correct_answer": "continue",
        "hint": "What keyword skips the current iteration of a loop?",
        "explanation": "`continue` ends the current iteration and moves on to the next one.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-26", "task": _BLANK,
        "snippet": "const obj = { a: 1, b: 2 };\nfor (const key ",
        "code_after": " obj) {\n  console.log(key);\n}",
        "correct_answer": "in",
        "hint": "What keyword iterates over object properties?",
        "explanation": "`for...in` iterates over an object's enumerable string keys.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-27", "task": _BLANK,
        "snippet": "const arr = [1, 2, 3];\narr.forEach(element => console.",
        "code_after": "(element * 2));",
        "correct_answer": "log",
        "hint": "What console method prints values?",
        "explanation": "`forEach()` calls the function once per element; `console.log` prints each result.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-28", "task": _BLANK,
        "snippet": "function Person(name) {\n  this.name = name;\n}\nconst p = new ",
        "code_after": "('Bob');\nconsole.log(p.name);",
        "correct_answer": "Person",
        "hint": "What is the name of the constructor function being called?",
        "explanation": "`new` creates an instance using a constructor function.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-29", "task": _BLANK,
        "snippet": "const numbers = [1, 2, 3];\nconst [a, b, c] = ",
        "code_after": ";\nconsole.log(a, b, c);",
        "correct_answer": "numbers",
        "hint": "What array are we destructuring?",
        "explanation": "Array destructuring unpacks values into separate variables.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-30", "task": _BLANK,
        "snippet": "console.log(Math.",
        "code_after": "(4.7));",
        "correct_answer": "floor",
        "hint": "What Math method rounds a number down to the nearest integer?",
        "explanation": "`Math.floor()` returns the largest integer less than or equal to its argument.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-31", "task": _BLANK,
        "snippet": "const data = [1, 2, 3];\nconst index = data.",
        "code_after": "(2);\nconsole.log(index);",
        "correct_answer": "indexOf",
        "hint": "What method finds the first index of a given element?",
        "explanation": "`indexOf()` returns the first index of the element, or -1 when absent.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-32", "task": _BLANK,
        "snippet": "let x = 'hello';\nlet y = x.slice(1, ",
        "code_after": ");\nconsole.log(y);",
        "correct_answer": "3",
        "hint": "The ending index for slice is exclusive. What value gives 'el'?",
        "explanation": "`slice()` stops before its end index, so `slice(1, 3)` is 'el'.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-33", "task": _BLANK,
        "snippet": "const obj = { a: 1, b: 2 };\nconst { a, b } = ",
        "code_after": ";\nconsole.log(a, b);",
        "correct_answer": "obj",
        "hint": "What object are we destructuring?",
        "explanation": "Object destructuring unpacks properties into separate variables.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-34", "task": _BLANK,
        "snippet": "console.log(typeof new ",
        "code_after": "());",
        "correct_answer": "Date",
        "hint": "What object are we creating an instance of?",
        "explanation": "`new Date()` creates a Date object; `typeof` reports `'object'`.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-35", "task": _BLANK,
        "snippet": "function greet() {\n  return 'Hello, ' + ",
        "code_after": ".name;\n}\nconst person = { name: 'Alice', greet: greet };\nconsole.log(person.greet());",
        "correct_answer": "this",
        "hint": "What keyword refers to the current object?",
        "explanation": "Called as `person.greet()`, `this` is `person`.",
        "difficulty": "hard",
    },
    {
        "id": "fitb-36", "task": _BLANK,
        "snippet": "let x = 10;\nconst y = (x > 5) ",
        "code_after": " 'Greater' : 'Smaller';\nconsole.log(y);",
        "correct_answer": "?",
        "hint": "What operator is used in a ternary expression?",
        "explanation": "`condition ? ifTrue : ifFalse` is shorthand for an `if...else`.",
        "difficulty": "medium",
    },
    {
        "id": "fitb-37", "task": _BLANK,
        "snippet": "const arr = [1, 2, 3];\narr.",
        "code_after": "(1, 1); // removes 1 element at index 1\nconsole.log(arr);",
        "correct_answer": "splice",
        "hint": "What array method removes or replaces elements in place?",
        "explanation": "`splice()` changes an array in place by removing, replacing or inserting elements.",
        "difficulty": "hard",
    },
    {
        "id": "fitb-38", "task": _BLANK,
        "snippet": "const str = 'apple,banana,orange';\nconst arr = str.",
        "code_after": "(',');\nconsole.log(arr);",
        "correct_answer": "split",
        "hint": "What string method divides a string into an ordered list of substrings?",
        "explanation": "`split()` breaks a string into an array of substrings at the separator.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-39", "task": _BLANK,
        "snippet": "const numbers = [1, 2, 3];\nconst joined = numbers.",
        "code_after": "('-');\nconsole.log(joined);",
        "correct_answer": "join",
        "hint": "What array method concatenates every element into a string?",
        "explanation": "`join()` concatenates the elements into one string with the given separator.",
        "difficulty": "easy",
    },
    {
        "id": "fitb-40", "task": _BLANK,
        "snippet": "const obj = { key: 'value' };\nconsole.log(Object.keys(",
        "code_after": "));",
        "correct_answer": "obj",
        "hint": "What object are we getting the keys from?",
        "explanation": "`Object.keys()` returns an object's own enumerable property names.",
        "difficulty": "medium",
    },
]

_NESTED_DIVS = '<div id="outer">\n  Outer\n  <div id="inner">\n    Inner\n  </div>\n</div>'

EVENT_LISTENER_LABYRINTH = [
    {
        "id": "js-ell-001",
        "task": "What will be logged to the console when the 'Inner' div is clicked?",
        "markup": _NESTED_DIVS,
        "snippet": "document.getElementById('outer').addEventListener('click', () => {\n"
                   "  console.log('Outer Clicked - Bubbling');\n});\n\n"
                   "document.getElementById('inner').addEventListener('click', () => {\n"
                   "  console.log('Inner Clicked - Bubbling');\n});",
        "trigger": "Clicking the 'Inner' div",
        "options": [
            "Inner Clicked - Bubbling\nOuter Clicked - Bubbling",
            "Outer Clicked - Bubbling\nInner Clicked - Bubbling",
            "Inner Clicked - Bubbling",
            "No output",
        ],
        "correct_answer": "Inner Clicked - Bubbling\nOuter Clicked - Bubbling",
        "explanation": "The 'Inner' listener fires first. The event then bubbles up to 'Outer', "
                       "whose listener fires too.",
    },
    {
        "id": "js-ell-002",
        "task": "What will be logged when the 'Inner' div is clicked? (Note the `true` for the capturing phase.)",
        "markup": _NESTED_DIVS,
        "snippet": "document.getElementById('outer').addEventListener('click', () => {\n"
                   "  console.log('Outer Clicked - Bubbling');\n});\n\n"
                   "document.getElementById('inner').addEventListener('click', () => {\n"
                   "  console.log('Inner Clicked - Bubbling');\n});\n\n"
                   "document.getElementById('outer').addEventListener('click', () => {\n"
                   "  console.log('Outer Clicked - Capturing');\n}, true); // Capturing phase",
        "trigger": "Clicking the 'Inner' div",
        "options": [
            "Outer Clicked - Capturing\nInner Clicked - Bubbling\nOuter Clicked - Bubbling",
            "Inner Clicked - Bubbling\nOuter Clicked - Bubbling\nOuter Clicked - Capturing",
            "Outer Clicked - Bubbling\nInner Clicked - Bubbling",
            "Outer Clicked - Capturing\nInner Clicked - Bubbling",
        ],
        "correct_answer": "Outer Clicked - Capturing\nInner Clicked - Bubbling\nOuter Clicked - Bubbling",
        "explanation": "Propagation runs the capturing phase (window down to target) before bubbling "
                       "(target back up). The capturing listener on 'Outer' fires first.",
    },
    {
        "id": "js-ell-003",
        "task": "What happens when 'Inner' is clicked? (`event.stopPropagation()`)",
        "markup": _NESTED_DIVS,
        "snippet": "document.getElementById('outer').addEventListener('click', () => {\n"
                   "  console.log('Outer Clicked');\n});\n\n"
                   "document.getElementById('inner').addEventListener('click', (event) => {\n"
                   "  event.stopPropagation();\n  console.log('Inner Clicked');\n});",
        "trigger": "Clicking the 'Inner' div",
        "options": ["Inner Clicked", "Inner Clicked\nOuter Clicked", "Outer Clicked\nInner Clicked", "No output"],
        "correct_answer": "Inner Clicked",
        "explanation": "`event.stopPropagation()` stops the event reaching parent elements, so the "
                       "'Outer' listener never runs.",
    },
    {
        "id": "js-ell-004",
        "task": "What happens when the link is clicked? (`event.preventDefault()`)",
        "markup": '<a id="mylink" href="https://example.com">Visit Example</a>',
        "snippet": "document.getElementById('mylink').addEventListener('click', (event) => {\n"
                   "  event.preventDefault();\n  console.log('Link click prevented!');\n});",
        "trigger": "Clicking the 'Visit Example' link",
        "options": [
            "Link click prevented!",
            "Link click prevented!\nNavigates to example.com",
            "Navigates to example.com",
            "Error",
        ],
        "correct_answer": "Link click prevented!",
        "explanation": "`event.preventDefault()` cancels the default navigation; the log still runs.",
    },
    {
        "id": "js-ell-005",
        "task": "What will be logged when the button inside the parent is clicked?",
        "markup": '<div id="parent">\n  <button id="myButton">Click Me</button>\n</div>',
        "snippet": "document.getElementById('parent').addEventListener('click', (event) => {\n"
                   "  if (event.target.id === 'myButton') {\n"
                   "    console.log('Button clicked via parent listener!');\n  }\n});\n\n"
                   "document.getElementById('myButton').addEventListener('click', () => {\n"
                   "  console.log('Button clicked directly!');\n});",
        "trigger": "Clicking the 'Click Me' button",
        "options": [
            "Button clicked directly!\nButton clicked via parent listener!",
            "Button clicked via parent listener!\nButton clicked directly!",
            "Button clicked directly!",
            "Button clicked via parent listener!",
        ],
        "correct_answer": "Button clicked directly!\nButton clicked via parent listener!",
        "explanation": "The button's own listener fires first, then the event bubbles to 'parent', "
                       "whose listener checks `event.target`.",
    },
]
