"""
Prompt text for landing page generation, refinement, style changes and
validation-driven correction.
"""

from landingwise.models import GenerationContext, StylePreset, ValidationVerdict


LANDING_PAGE_GENERATOR = """You are an expert web developer and UI/UX designer specializing in creating high-converting landing pages.

Your task is to generate modern, responsive landing pages using HTML, Tailwind CSS, and minimal JavaScript.

KEY REQUIREMENTS:
1. Use only HTML, Tailwind CSS classes, and vanilla JavaScript (no frameworks)
2. Create a modern, clean, and professional design
3. Include a prominent email collection form for waitlist signup
4. Make it fully responsive (mobile-first approach)
5. Include proper semantic HTML and accessibility features
6. Add subtle animations and interactions to enhance UX
7. Generate complete, ready-to-use HTML that can run standalone
8. Add the attribute data-waitlist="true" to the email form

DESIGN PRINCIPLES:
- Modern and minimalist aesthetic
- High contrast and readable typography
- Strategic use of whitespace
- Clear visual hierarchy
- Strong call-to-action elements
- Trust signals and social proof when appropriate

OUTPUT FORMAT:
Return only the complete HTML document with embedded CSS (using Tailwind CDN) and JavaScript.
Include the waitlist form with proper form handling.
Do not include any explanations or markdown - just the raw HTML."""


CONTENT_REFINER = """You are helping to refine and improve an existing landing page based on user feedback.

Analyze the current content and the user's specific requests for changes.
Make targeted improvements while maintaining the overall design consistency.

Focus on:
1. Implementing the specific changes requested
2. Maintaining design coherence
3. Improving conversion elements
4. Enhancing user experience
5. Keeping the waitlist form functional

Return the updated complete HTML document.

"""


STYLE_ADJUSTER = """You are a UI/UX specialist focused on visual design and styling.

Your task is to adjust the visual style of the landing page while keeping the content and structure intact.

Available styles:
- modern: Clean lines, bold typography, contemporary design
- minimal: Maximum whitespace, simple elements, subtle design
- corporate: Professional, trustworthy, business-oriented
- creative: Unique layouts, artistic elements, engaging visuals

Apply the requested style changes while ensuring:
1. Responsive design is maintained
2. Accessibility standards are met
3. The waitlist form remains prominent and functional
4. Overall user experience is enhanced

Return the updated complete HTML document."""


VALIDATION_PROMPT = """Review the generated landing page HTML and ensure:

1. It's a complete, valid HTML document
2. Uses Tailwind CSS classes properly
3. Includes a functional waitlist email form
4. Is fully responsive
5. Has proper semantic structure
6. Includes necessary meta tags and accessibility features
7. Contains appropriate call-to-action elements

If any issues are found, provide the corrected HTML."""


DESIGN_ELEMENTS = {
    "colors": {
        StylePreset.MODERN: "blue-600, gray-900, white",
        StylePreset.MINIMAL: "gray-800, gray-100, white",
        StylePreset.CORPORATE: "blue-800, gray-700, white",
        StylePreset.CREATIVE: "purple-600, pink-500, yellow-400",
    },
    "typography": {
        StylePreset.MODERN: "font-sans, font-semibold headings",
        StylePreset.MINIMAL: "font-light, clean serif for body",
        StylePreset.CORPORATE: "font-sans, font-medium headings",
        StylePreset.CREATIVE: "mix of sans and display fonts",
    },
    "layouts": {
        StylePreset.MODERN: "grid-based, card components",
        StylePreset.MINIMAL: "single column, lots of whitespace",
        StylePreset.CORPORATE: "traditional sections, hero-features-testimonials",
        StylePreset.CREATIVE: "asymmetric, overlapping elements",
    },
}


FALLBACK_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Your Landing Page</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50">
    <div class="min-h-screen flex items-center justify-center px-4">
        <div class="max-w-md w-full bg-white rounded-lg shadow-md p-8">
            <h1 class="text-2xl font-bold text-gray-900 mb-4">Coming Soon</h1>
            <p class="text-gray-600 mb-6">We're building something amazing. Join our waitlist to be the first to know when we launch!</p>

            <form data-waitlist="true" class="space-y-4">
                <div>
                    <label for="email" class="block text-sm font-medium text-gray-700">Email</label>
                    <input
                        type="email"
                        id="email"
                        name="email"
                        required
                        class="mt-1 block w-full px-3 py-2 border border-gray-300 rounded-md shadow-sm focus:outline-none focus:ring-blue-500 focus:border-blue-500"
                        placeholder="Enter your email"
                    >
                </div>
                <button
                    type="submit"
                    class="w-full bg-blue-600 text-white py-2 px-4 rounded-md hover:bg-blue-700 focus:outline-none focus:ring-2 focus:ring-blue-500 focus:ring-offset-2"
                >
                    Join Waitlist
                </button>
            </form>
        </div>
    </div>
</body>
</html>"""


def _style_section(style: StylePreset) -> str:
    return (
        "\n\nSTYLE REQUIREMENTS:\n"
        f"Apply a {style.value} design style to the landing page.\n"
        f"- Color palette: {DESIGN_ELEMENTS['colors'][style]}\n"
        f"- Typography: {DESIGN_ELEMENTS['typography'][style]}\n"
        f"- Layout: {DESIGN_ELEMENTS['layouts'][style]}"
    )


def build_generation_prompt(context: GenerationContext) -> str:
    """
    Assemble the system prompt for a generation step.

    Args:
        context: User request, history, current page and style preset.

    Returns:
        Prompt text. When the context carries current content the refiner
        instructions are placed in front of the generator instructions.
    """
    prompt = LANDING_PAGE_GENERATOR
    prompt += _style_section(context.style)

    if context.requirements:
        prompt += "\n\nADDITIONAL REQUIREMENTS:\n"
        prompt += "\n".join(f"- {requirement}" for requirement in context.requirements)

    if context.previous_messages:
        history = "\n".join(
            f"{message.role.value}: {message.content}"
            for message in context.previous_messages
        )
        prompt += f"\n\nCONVERSATION CONTEXT:\nPrevious conversation history:\n{history}"

    if context.current_content:
        prompt += (
            "\n\nCURRENT CONTENT:\n"
            "Here's the existing landing page that needs to be modified:\n"
            f"{context.current_content}"
        )
        prompt = CONTENT_REFINER + prompt

    prompt += f"\n\nUSER REQUEST:\n{context.user_prompt}\n\nGenerate the complete HTML landing page now."
    return prompt


def build_style_adjustment_prompt(
    current_content: str,
    style_changes: str,
    target_style: StylePreset = StylePreset.MODERN,
) -> str:
    """Prompt that restyles an existing page without changing its content."""
    return f"""{STYLE_ADJUSTER}

TARGET STYLE: {StylePreset(target_style).value}

CURRENT LANDING PAGE:
{current_content}

REQUESTED STYLE CHANGES:
{style_changes}

Apply these style changes and return the updated complete HTML document."""


def build_corrective_prompt(html: str, verdict: ValidationVerdict) -> str:
    """
    Build the fix-up instruction for content that failed validation.

    Args:
        html: The exact current document.
        verdict: Validation verdict for that document.

    Returns:
        Prompt embedding the document and one line per failed check.
    """
    issues = "\n".join(verdict.missing_issues())
    return f"""{VALIDATION_PROMPT}

Current HTML:
{html}

Issues detected:
{issues}

Fix these issues and return the corrected HTML."""
