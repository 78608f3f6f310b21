CONTENT = {
    "id": "phase-1",
    "title": "Phase 1: Foundations",
    "emoji": "🟢",
    "description": "Big-O notation, complexity analysis and recursion.",
    "topics": [
        {
            "id": "big-o-notation",
            "title": "Big-O Notation",
            "explanation": (
                "Big-O describes how running time or memory grows with input size, "
                "keeping only the dominant term. O(1) is constant, O(log n) halves the "
                "problem each step, O(n) touches every element once, O(n^2) compares "
                "every pair."
            ),
            "codeExample": (
                "def contains(items, target):  # O(n)\n"
                "    for item in items:\n"
                "        if item == target:\n"
                "            return True\n"
                "    return False"
            ),
            "exercise": "Give the time complexity of five short snippets, then check your answers by counting operations.",
            "commonMistakes": [
                "Keeping constants and lower-order terms",
                "Ignoring the cost of built-ins such as `list.insert(0, x)`",
            ],
            "interviewQuestions": [
                {
                    "type": "conceptual",
                    "q": "Why is binary search O(log n)?",
                    "a": "Each comparison halves the remaining range, so at most log2(n) steps are needed.",
                },
                {
                    "type": "meta",
                    "q": "How do you talk about complexity during an interview?",
                    "a": "State time and space for the brute force first, then for each improvement, naming the dominant operation.",
                },
            ],
        },
        {
            "id": "recursion-fundamentals",
            "title": "Recursion Fundamentals",
            "explanation": (
                "A recursive function solves a problem by calling itself on a smaller "
                "input. Every recursion needs a base case and progress toward it."
            ),
            "codeExample": (
                "def factorial(n):\n"
                "    if n <= 1:\n"
                "        return 1\n"
                "    return n * factorial(n - 1)"
            ),
            "exercise": "Write `power(x, n)` recursively in O(log n) multiplications.",
            "commonMistakes": [
                "Missing or unreachable base case",
            ],
            "interviewQuestions": [
                {
                    "type": "behavioral",
                    "q": "Tell me about a time recursion caused a production issue.",
                    "a": "Describe the stack overflow, how it was found, and the iterative rewrite or depth limit that fixed it.",
                },
            ],
        },
    ],
}
