# Extra Phase 1 topics, appended to javascript_phase1 by the roadmap index
CONTENT = [
    {
        "id": "functions",
        "title": "Functions",
        "explanation": (
            "Functions are first-class values: they can be stored in variables, passed "
            "as arguments and returned from other functions. Declarations are hoisted; "
            "function expressions and arrow functions are not."
        ),
        "codeExample": (
            "function greet(name) {\n"
            "  return `Hello, ${name}!`;\n"
            "}\n"
            "const square = (n) => n * n;"
        ),
        "exercise": "Rewrite three function declarations as arrow functions and note what changes about `this`.",
        "commonMistakes": [
            "Calling a function expression before it is defined",
            "Using an arrow function as an object method and expecting `this` to be the object",
        ],
        "interviewQuestions": [
            {
                "type": "conceptual",
                "q": "How do arrow functions differ from regular functions?",
                "a": "They have no own `this`, `arguments` or `prototype`, cannot be used with `new`, and take `this` from the enclosing scope.",
            },
        ],
    },
]
