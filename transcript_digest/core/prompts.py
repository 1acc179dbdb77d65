summary_template = """
    Please summarize the following YouTube video transcript.
    Video title: "{title}"
    Channel: "{channel}"
    Duration: {duration} minutes

    Provide a concise summary (3-5 paragraphs) and extract 3-5 key points.
    Put the key points last, under a line reading "Key points:".

    Transcript:
    {transcript}
    """

truncation_marker = " ...(transcript truncated due to length)"
