"""C++ question banks. Every question is a typed answer for one blank."""

POINTER_PATH_PUZZLE = [
    {
        "id": "pointer-001",
        "task": "Declare an integer pointer named `ptr`.",
        "snippet": "int value = 10;\n/* YOUR ANSWER HERE */ ptr;",
        "placeholder": "int* / int",
        "correct_answer": "int*",
        "explanation": "`int*` declares a pointer to an integer; the asterisk marks the pointer type.",
    },
    {
        "id": "pointer-002",
        "task": "Assign the address of the `value` variable to the pointer `ptr`.",
        "snippet": "int value = 10;\nint* ptr;\nptr = /* YOUR ANSWER HERE */ value;",
        "placeholder": "& / *",
        "correct_answer": "&",
        "explanation": "The `&` (address-of) operator yields a variable's memory address.",
    },
    {
        "id": "pointer-003",
        "task": "Dereference the pointer `ptr` to read the value it points to into `result`.",
        "snippet": "int value = 25;\nint* ptr = &value;\nint result = /* YOUR ANSWER HERE */ ptr;",
        "placeholder": "* / &",
        "correct_answer": "*",
        "explanation": "The `*` (dereference) operator reads the value stored at the pointer's address.",
    },
    {
        "id": "pointer-004",
        "task": "Change the value of `data` to 50 through its pointer `pData`.",
        "snippet": "int data = 100;\nint* pData = &data;\n/* YOUR ANSWER HERE */ pData = 50;",
        "placeholder": "* / &",
        "correct_answer": "*",
        "explanation": "Assigning through `*pData` writes to the memory `pData` points at, which is `data`.",
    },
    {
        "id": "pointer-005",
        "task": "Declare a pointer `pChar` pointing to the first element of the `message` array.",
        "snippet": 'char message[] = "Hello";\nchar* /* YOUR ANSWER HERE */ = message;',
        "placeholder": "pChar / &pChar",
        "correct_answer": "pChar",
        "explanation": "An array name decays to a pointer to its first element, so "
                       "`char* pChar = message;` points at 'H'.",
    },
    {
        "id": "pointer-006",
        "task": "Move the pointer `ptr` to the next integer in memory.",
        "snippet": "int arr[] = {10, 20, 30};\nint* ptr = arr; // ptr points to 10\n"
                   "ptr/* YOUR ANSWER HERE */; // ptr should now point to 20",
        "placeholder": "++ / --",
        "correct_answer": "++",
        "explanation": "Pointer arithmetic steps by the size of the pointed-to type, so `ptr++` "
                       "reaches the next `int`.",
    },
    {
        "id": "pointer-007",
        "task": "Initialize an integer pointer to null.",
        "snippet": "int* myPtr = /* YOUR ANSWER HERE */;",
        "placeholder": "nullptr / NULL / 0",
        "correct_answer": "nullptr",
        "explanation": "`nullptr` (C++11) is the type-safe null pointer, preferred over `NULL` or `0`.",
    },
    {
        "id": "pointer-008",
        "task": "Check that the pointer `dataPtr` is NOT null.",
        "snippet": "int* dataPtr = new int(5);\nif (dataPtr /* YOUR ANSWER HERE */ nullptr) {\n"
                   "  // do something\n}",
        "placeholder": "!= / ==",
        "correct_answer": "!=",
        "explanation": "`!= nullptr` is true when the pointer refers to something.",
    },
    {
        "id": "pointer-009",
        "task": "Name a constant pointer to a modifiable integer: the value may change, "
                "the pointer may not be reseated.",
        "snippet": "int x = 10;\nint y = 20;\nint* const /* YOUR ANSWER HERE */ = &x; "
                   "// p_const_ptr points to x, but can't point elsewhere",
        "placeholder": "p_const_ptr / const_ptr_p",
        "correct_answer": "p_const_ptr",
        "explanation": "`const` after the asterisk makes the pointer itself constant. It must be "
                       "initialized and cannot be reassigned.",
    },
    {
        "id": "pointer-010",
        "task": "Name a pointer to a constant integer: it may be reseated, but cannot modify the value.",
        "snippet": "const int x = 10;\nint y = 20;\nconst int* /* YOUR ANSWER HERE */; "
                   "// p_to_const can point to x or y, but not change their values through it\n"
                   "p_to_const = &x;",
        "placeholder": "p_to_const / const_p_to",
        "correct_answer": "p_to_const",
        "explanation": "`const` before the asterisk makes the pointed-to data read-only through "
                       "this pointer; the pointer itself can be reassigned.",
    },
]

MEMORY_MANAGER_MAZE = [
    {
        "id": "memory-001",
        "task": "Dynamically allocate an integer and initialize it to 10.",
        "snippet": "int* numPtr = /* YOUR ANSWER HERE */ int(10);",
        "placeholder": "new / malloc",
        "correct_answer": "new",
        "explanation": "`new` allocates an object (or array of objects) on the heap.",
    },
    {
        "id": "memory-002",
        "task": "Deallocate the dynamically allocated integer pointed to by `numPtr`.",
        "snippet": "int* numPtr = new int(20);\n/* YOUR ANSWER HERE */ numPtr;",
        "placeholder": "delete / free",
        "correct_answer": "delete",
        "explanation": "`delete` frees memory obtained with `new`. Forgetting it leaks memory.",
    },
    {
        "id": "memory-003",
        "task": "Dynamically allocate an array of 5 integers.",
        "snippet": "int* arrPtr = /* YOUR ANSWER HERE */ int[5];",
        "placeholder": "new / new[]",
        "correct_answer": "new",
        "explanation": "Arrays are allocated with `new Type[size]`; the brackets belong to the type, "
                       "the operator is `new`.",
    },
    {
        "id": "memory-004",
        "task": "Deallocate the dynamically allocated array pointed to by `arrPtr`.",
        "snippet": "int* arrPtr = new int[10];\n/* YOUR ANSWER HERE */ arrPtr;",
        "placeholder": "delete[] / delete",
        "correct_answer": "delete[]",
        "explanation": "Arrays from `new[]` must be released with `delete[]`. Plain `delete` on an "
                       "array is undefined behavior.",
    },
    {
        "id": "memory-005",
        "task": "What happens if you forget to `delete` memory allocated with `new`?",
        "snippet": "// What's the problem here?\nvoid myFunction() {\n  int* data = new int(100);\n"
                   "  // No delete!\n}",
        "placeholder": "Memory Leak / Stack Overflow",
        "correct_answer": "Memory Leak",
        "explanation": "Memory that is allocated and never freed stays occupied until the program "
                       "exits: a memory leak.",
    },
    {
        "id": "memory-006",
        "task": "After deleting a pointer, reset it so it does not dangle. What's missing?",
        "snippet": "int* ptr = new int;\ndelete ptr;\nptr = /* YOUR ANSWER HERE */;",
        "placeholder": "nullptr / 0",
        "correct_answer": "nullptr",
        "explanation": "Setting the pointer to `nullptr` after `delete` avoids use-after-free through "
                       "a dangling pointer.",
    },
    {
        "id": "memory-007",
        "task": "Access the third element (index 2) of the dynamically allocated array `myArray`.",
        "snippet": "int* myArray = new int[5]; // Array of 5 integers\nmyArray[2] = 7;\n"
                   "int val = /* YOUR ANSWER HERE */;",
        "placeholder": "myArray[2] / *(myArray + 2)",
        "correct_answer": "myArray[2]",
        "explanation": "Heap arrays support the same `[]` subscript as static arrays. "
                       "`*(myArray + 2)` is the pointer-arithmetic equivalent.",
    },
    {
        "id": "memory-008",
        "task": "Allocate a character array for a 20-character string plus its null terminator.",
        "snippet": "char* name = /* YOUR ANSWER HERE */ char[21]; // For a 20-char string + null terminator",
        "placeholder": "new / new()",
        "correct_answer": "new",
        "explanation": "`new char[21]` leaves room for 20 characters and the terminating `\\0`.",
    },
    {
        "id": "memory-009",
        "task": "What is the main benefit of `std::unique_ptr` over a raw pointer?",
        "snippet": "// What does unique_ptr provide automatically?\n"
                   "std::unique_ptr<int> data = std::make_unique<int>(10);\n// No manual delete needed!",
        "placeholder": "Automatic deallocation / Faster execution",
        "correct_answer": "Automatic deallocation",
        "explanation": "`std::unique_ptr` owns its object exclusively and deletes it when it goes "
                       "out of scope.",
    },
    {
        "id": "memory-010",
        "task": "What is the main benefit of `std::shared_ptr`?",
        "snippet": "// What does shared_ptr manage?\nstd::shared_ptr<int> ptr1 = std::make_shared<int>(10);\n"
                   "std::shared_ptr<int> ptr2 = ptr1; // Shared ownership!",
        "placeholder": "Shared ownership and automatic deallocation / Fixed memory size",
        "correct_answer": "Shared ownership and automatic deallocation",
        "explanation": "`std::shared_ptr` reference-counts its object and frees it when the last "
                       "owner goes away.",
    },
]

TEMPLATE_TYPE_TROOPER = [
    {
        "id": "template-001",
        "task": "Create a function template `add` that adds two values of any type `T`.",
        "snippet": "/* YOUR ANSWER HERE */<typename T>\nT add(T a, T b) {\n  return a + b;\n}",
        "placeholder": "template / class",
        "correct_answer": "template",
        "explanation": "`template` followed by a parameter list in angle brackets declares a "
                       "function or class template.",
    },
    {
        "id": "template-002",
        "task": "Call the `add` template function with two integer arguments.",
        "snippet": "template<typename T>\nT add(T a, T b) {\n  return a + b;\n}\n\nint main() {\n"
                   "  int result = /* YOUR ANSWER HERE */(5, 7);\n  return 0;\n}",
        "placeholder": "add / add<int>",
        "correct_answer": "add",
        "explanation": "The compiler deduces `T` as `int` from the arguments, so `add(5, 7)` is enough.",
    },
    {
        "id": "template-003",
        "task": "Call `add` explicitly specifying the type `double`.",
        "snippet": "template<typename T>\nT add(T a, T b) {\n  return a + b;\n}\n\nint main() {\n"
                   "  double result = add/* YOUR ANSWER HERE */(5.5, 7.2);\n  return 0;\n}",
        "placeholder": "<double> / (double)",
        "correct_answer": "<double>",
        "explanation": "Explicit template arguments go in angle brackets after the name: `add<double>(...)`.",
    },
    {
        "id": "template-004",
        "task": "Declare a class template `Box` that holds a value of any type `U`.",
        "snippet": "/* YOUR ANSWER HERE */<class U>\nclass Box {\npublic:\n  U value;\n"
                   "  Box(U v) : value(v) {}\n};",
        "placeholder": "template / typename",
        "correct_answer": "template",
        "explanation": "`template<class U>` (or `template<typename U>`) declares a class template.",
    },
    {
        "id": "template-005",
        "task": "Create an instance of the `Box` template class holding an `int`.",
        "snippet": "template<class U>\nclass Box {\npublic:\n  U value;\n  Box(U v) : value(v) {}\n};\n\n"
                   "int main() {\n  Box/* YOUR ANSWER HERE */ myIntBox(10);\n  return 0;\n}",
        "placeholder": "<int> / (int)",
        "correct_answer": "<int>",
        "explanation": "Before C++17 a class template needs its arguments spelled out: `Box<int> myIntBox(10);`.",
    },
    {
        "id": "template-006",
        "task": "Which keyword can replace `typename` for a type parameter?",
        "snippet": "template</* YOUR ANSWER HERE */ T, typename U>",
        "placeholder": "class / type",
        "correct_answer": "class",
        "explanation": "`class` and `typename` are interchangeable for type parameters.",
    },
    {
        "id": "template-007",
        "task": "Give `printArray` a size parameter for an array of any type `T`.",
        "snippet": "template<typename T>\nvoid printArray(T arr[], /* YOUR ANSWER HERE */ size) {\n"
                   "  for (int i = 0; i < size; ++i) {\n    // print arr[i]\n  }\n}",
        "placeholder": "int / T",
        "correct_answer": "int",
        "explanation": "The size is a count, so it stays `int` whatever the element type `T` is.",
    },
    {
        "id": "template-008",
        "task": "Declare the first of several template type parameters.",
        "snippet": "template</* YOUR ANSWER HERE */ T, typename U, class V>",
        "placeholder": "typename / ,",
        "correct_answer": "typename",
        "explanation": "Each type parameter is introduced by `typename` (or `class`); parameters are "
                       "separated by commas.",
    },
    {
        "id": "template-009",
        "task": "Complete the explicit specialization of `func` for `double`.",
        "snippet": "template<>\nvoid func/* YOUR ANSWER HERE */(double val) {\n  // specialized for double\n}",
        "placeholder": "<double> / (double)",
        "correct_answer": "<double>",
        "explanation": "An explicit specialization is `template<>` followed by the signature with the "
                       "specialized type in angle brackets.",
    },
    {
        "id": "template-010",
        "task": "What is it called when the compiler generates concrete code from a template for a type?",
        "snippet": "// template<typename T> void print(T val) {}\n// print(5); // Compiler creates print<int>",
        "placeholder": "Instantiation / Polymorphism",
        "correct_answer": "Instantiation",
        "explanation": "Instantiation substitutes real types for the template parameters to produce "
                       "a concrete function or class.",
    },
]
