CONTENT = {
    "id": "phase-1",
    "title": "Phase 1: Foundations",
    "emoji": "🟢",
    "description": "Variables, operators and the building blocks of JavaScript.",
    "topics": [
        {
            "id": "variables-data-types",
            "title": "Variables & Data Types",
            "explanation": (
                "Variables are named containers for values.\n\n"
                "**let** is block-scoped and can be reassigned. **const** is block-scoped "
                "and cannot be reassigned. **var** is function-scoped and hoisted; avoid it "
                "in modern code.\n\n"
                "JavaScript has seven primitive types (string, number, bigint, boolean, "
                "undefined, null, symbol) and one non-primitive: object."
            ),
            "codeExample": (
                "let age = 25;\n"
                "const name = \"Alice\";\n"
                "console.log(typeof null); // \"object\" (a legacy quirk)\n"
                "const user = { name: \"Alice\" };\n"
                "user.name = \"Bob\"; // fine: the binding is constant, not the object"
            ),
            "exercise": (
                "Store your name and birth year with `const`, your city with `let`, "
                "then log the type of each value with `typeof`."
            ),
            "commonMistakes": [
                "Thinking `const` makes objects immutable",
                "Forgetting that `typeof null` is `\"object\"`",
            ],
            "interviewQuestions": [
                {
                    "type": "conceptual",
                    "q": "What is the difference between `var`, `let` and `const`?",
                    "a": (
                        "`var` is function-scoped and hoisted with an `undefined` value. "
                        "`let` and `const` are block-scoped and sit in the temporal dead "
                        "zone until declared; `const` also forbids reassignment."
                    ),
                },
                {
                    "type": "tricky",
                    "q": "What does `typeof null` return and why?",
                    "a": "`\"object\"`, a bug from the first JavaScript implementation kept for compatibility.",
                },
            ],
        },
        {
            "id": "operators",
            "title": "Operators",
            "explanation": (
                "Arithmetic, comparison and logical operators. Prefer strict equality "
                "(`===`), which compares without type coercion."
            ),
            "codeExample": (
                "console.log(1 == \"1\");  // true, coerced\n"
                "console.log(1 === \"1\"); // false\n"
                "const port = config.port ?? 3000;"
            ),
            "exercise": "Predict the output of ten mixed `==` / `===` comparisons, then run them.",
            "commonMistakes": [
                "Using `==` and relying on coercion rules",
                "Using `||` for defaults when `0` or `\"\"` are valid values",
            ],
            "interviewQuestions": [
                {
                    "type": "conceptual",
                    "q": "When would you use `??` instead of `||`?",
                    "a": "When falsy values such as `0` or an empty string are valid and only `null`/`undefined` should fall back.",
                },
            ],
        },
    ],
}
