summary_template = """You are an expert summarizer. Please summarize the following video transcript in a concise manner."""

summary_instruction_template = """
Additionally, follow this specific instruction: {custom_instruction}"""

summary_transcript_template = """

Transcript:
{transcript}"""


actionable_items_template = """You are an AI expert in extracting actionable items from text.

Given the following video transcription, extract a list of actionable items. Actionable items should be specific and directly derived from the transcription."""

actionable_items_instruction_template = """
When extracting the items, follow this specific instruction: {custom_instruction}"""

actionable_items_transcript_template = """

Transcription: {transcription}

Actionable Items:"""


actionable_plan_template = """You are an expert in creating actionable plans from transcriptions.

Convert the following video transcription into a structured, actionable plan with prioritized steps.
The plan should be clear, concise, and easy to follow.
- Include practical tips for implementing each step of the plan.
- If possible, frame the overall plan around a SMART goal (Specific, Measurable, Achievable, Relevant, Time-bound) derived from the transcription content, or help define one. If a clear SMART goal isn't directly evident, suggest how the user might formulate one based on the video's key takeaways.

Transcription:
{transcription}"""


highlight_template = """You are an expert in text analysis. Your task is to process a video transcription and break it down into segments. For each segment, you need to determine if it should be highlighted (e.g., made bold) based on criteria like repetition of ideas, key takeaways, or phrases that likely indicate higher viewer attention or were delivered with emphasis.

The goal is to make the transcription easier to skim by emphasizing important parts.

Input: A string containing the video transcription.

Output: An array of objects, where each object represents a segment of the transcription. Each object should have two properties:
1.  `text`: The text content of the segment. Copy the text exactly; do not rephrase, correct or drop words. Ensure the full transcription is covered and segments are contiguous.
2.  `highlight`: A boolean value (`true` if the segment should be highlighted, `false` otherwise).

The segments should cover the entire original transcription in order.
Focus on identifying genuinely important or emphatically delivered parts. Avoid highlighting too much; be selective. Repetitive phrases that reinforce a point, or summary statements, are good candidates for highlighting.

Transcription:
{transcription}"""


TRANSCRIBE_AUDIO_PROMPT = "Transcribe the audio accurately. Provide only the transcribed text."

TRANSCRIBE_VIDEO_AUDIO_PROMPT = "Transcribe the audio from this video accurately. Provide only the transcribed text."
