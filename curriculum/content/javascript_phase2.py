CONTENT = {
    "id": "phase-2",
    "title": "Phase 2: Intermediate",
    "emoji": "🟡",
    "description": "Closures, `this`, prototypes and modern JavaScript patterns.",
    "topics": [
        {
            "id": "closures-lexical-scope",
            "title": "Closures & Lexical Scope",
            "explanation": (
                "A closure is a function bundled with references to the variables of the "
                "scope it was created in. Inner functions keep access to those variables "
                "after the outer function has returned.\n\n"
                "```js\n"
                "const counter = makeCounter();\n"
                "counter(); // 1\n"
                "```"
            ),
            "codeExample": (
                "function makeCounter() {\n"
                "  let count = 0;\n"
                "  return () => ++count;\n"
                "}\n"
                "const next = makeCounter();\n"
                "next(); // 1\n"
                "next(); // 2"
            ),
            "exercise": "Build a `once(fn)` helper that runs `fn` only on its first call and caches the result.",
            "commonMistakes": [
                "Capturing a `var` loop variable and expecting each callback to see its own value",
                "Holding large objects in a closure longer than needed",
            ],
            "interviewQuestions": [
                {
                    "type": "coding",
                    "q": "Implement `memoize(fn)` for single-argument functions.",
                    "a": "Keep a `Map` in the outer scope; return a function that checks the map before calling `fn` and stores the result.",
                },
                {
                    "type": "tricky",
                    "q": "What does `for (var i = 0; i < 3; i++) setTimeout(() => console.log(i))` print?",
                    "a": "`3` three times: every callback closes over the same function-scoped `i`. Using `let` prints 0, 1, 2.",
                },
            ],
        },
        {
            "id": "this-keyword",
            "title": "The `this` Keyword",
            "explanation": (
                "`this` is set by how a function is called: as a method, with `new`, "
                "through `call`/`apply`/`bind`, or plainly (undefined in strict mode). "
                "Arrow functions take `this` from their enclosing scope."
            ),
            "codeExample": (
                "const user = {\n"
                "  name: \"Ada\",\n"
                "  hello() { return this.name; },\n"
                "};\n"
                "const detached = user.hello;\n"
                "detached(); // undefined in strict mode"
            ),
            "exercise": "Fix a detached method callback three ways: `bind`, an arrow wrapper, and a class field.",
            "commonMistakes": [
                "Passing `obj.method` as a callback and losing `this`",
            ],
            "interviewQuestions": [
                {
                    "type": "scenario",
                    "q": "A click handler logs `undefined` for `this.state`. How do you debug and fix it?",
                    "a": "Check how the handler is invoked; it is detached from its instance. Bind it in the constructor or define it as an arrow class field.",
                },
            ],
        },
    ],
}
